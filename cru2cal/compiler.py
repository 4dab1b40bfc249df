"""
compiler.py - Kompajler Course lista -> kalendarski IR

Pretvara sedmicne termine u konkretne dogadjaje izmedju dva datuma.

Koraci kompajliranja:
    1. Provjera perioda i izbor tipova nastave koji ulaze u kalendar
    2. Prolaz kroz svaki dan perioda
    3. Za svaki termin ciji dan odgovara danu u sedmici kreira se Event
"""
import logging
from datetime import date, datetime, timedelta
from typing import Dict, List
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .ir import CalendarModel, Event
from .models import Course

logger = logging.getLogger(__name__)


class CalendarCompiler:
    """Kompajlira listu predmeta u CalendarModel IR.

    Args:
        courses: predmeti koji ulaze u kalendar
        start_date, end_date: period (date objekti, ukljucivo)
        weekdays: kod dana -> broj dana u sedmici (ponedjeljak = 0)
        session_types: kod tipa nastave -> oznaka (npr. {"C1": "CM"});
                       termini drugih tipova se preskacu
        timezone: naziv IANA vremenske zone (npr. "Europe/Paris")
    """

    def __init__(self, courses: List[Course], start_date: date, end_date: date,
                 weekdays: Dict[str, int], session_types: Dict[str, str],
                 timezone: str):
        if start_date > end_date:
            raise ValueError("Pocetni datum mora biti prije krajnjeg datuma.")

        self.courses = courses
        self.weekdays = weekdays
        self.session_types = session_types
        try:
            self.tz = ZoneInfo(timezone)
        except ZoneInfoNotFoundError as e:
            raise ValueError(f"Nepoznata vremenska zona '{timezone}'.") from e

        self.model = CalendarModel(
            start_date=start_date,
            end_date=end_date,
            timezone=timezone,
        )

    def compile(self) -> CalendarModel:
        """Glavna metoda: generise sve dogadjaje u periodu."""
        counters = {}
        current = self.model.start_date

        while current <= self.model.end_date:
            for course in self.courses:
                for slot in course.slots:
                    label = self.session_types.get(slot.session_type)
                    if label is None:
                        continue
                    if self.weekdays.get(slot.day) != current.weekday():
                        continue
                    if slot.duration_minutes <= 0:
                        logger.warning("Preskacem termin %s %s (%s): kraj nije poslije pocetka.",
                                       course.name, slot.time_range, slot.room)
                        continue

                    counters[course.code] = counters.get(course.code, 0) + 1
                    self.model.events.append(Event(
                        uid=f"{course.code}-{counters[course.code]}@cru2cal",
                        course=course,
                        slot=slot,
                        label=label,
                        start_dt=self._at(current, slot.start_minutes),
                        end_dt=self._at(current, slot.end_minutes),
                    ))
            current += timedelta(days=1)

        return self.model

    def _at(self, day, minutes):
        """Datum + minute od ponoci -> datetime u vremenskoj zoni kalendara.

        24:00 prelazi na ponoc narednog dana."""
        midnight = datetime(day.year, day.month, day.day, tzinfo=self.tz)
        return midnight + timedelta(minutes=minutes)
