"""
ics_gen.py - iCalendar izlaz

Pretvara CalendarModel (IR) u .ics fajl koristeci ics biblioteku.
Svaki Event iz IR-a postaje jedan VEVENT.
"""
from ics import Calendar, Event


class ICSCalendarGenerator:
    PRODID = "-//cru2cal//Emploi du temps 1.0//FR"

    def __init__(self, model):
        self.model = model

    def build(self):
        """Gradi ics.Calendar objekat iz IR modela."""
        cal = Calendar(creator=self.PRODID)
        for item in self.model.events:
            ev = Event()
            ev.name = item.summary
            ev.begin = item.start_dt
            ev.end = item.end_dt
            ev.location = item.location
            ev.description = item.description
            ev.uid = item.uid
            cal.events.add(ev)
        return cal

    def generate(self, path):
        """Zapisuje kalendar u fajl. Serializer vraca CRLF linije."""
        cal = self.build()
        with open(path, 'w', encoding='utf-8', newline='') as f:
            f.writelines(cal.serialize_iter())
        return cal
