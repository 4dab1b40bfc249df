import json


class JSONScheduleGenerator:
    def __init__(self, courses):
        self.courses = courses

    def generate(self):
        return [course.to_dict() for course in self.courses]

    def dumps(self):
        return json.dumps(self.generate(), indent=2, ensure_ascii=False)

    def write(self, path):
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(self.generate(), f, indent=2, ensure_ascii=False)
