class MarkdownReportGenerator:
    def __init__(self, courses, day_labels=None, session_types=None):
        self.courses = courses
        self.day_labels = day_labels or {}
        self.session_types = session_types or {}

    def generate(self):
        report = "# Emploi du temps - Izvjestaj po predmetima\n\n"
        for course in self.courses:
            report += f"### {course.code}\n"
            if not course.slots:
                report += "- Nema termina\n\n"
                continue

            report += "| Tip | Dan | Vrijeme | Podgrupa | Prostorija | Kapacitet |\n"
            report += "|-----|-----|---------|----------|------------|-----------|\n"
            for slot in course.slots:
                type_label = self.session_types.get(slot.session_type, slot.session_type)
                day_label = self.day_labels.get(slot.day, slot.day)
                report += (f"| {type_label} | {day_label} | {slot.time_range} | F{slot.group}"
                           f" | {slot.room} | {slot.capacity} |\n")
            report += "\n"
        return report
