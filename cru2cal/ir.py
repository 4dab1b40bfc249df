"""
ir.py - Intermediate Representation (IR) za kalendar

IR je srednji sloj izmedju parsiranog modela (Course/Slot) i izlaznih
generatora. Model sadrzi sedmicne termine bez datuma, a IR sadrzi
konkretne dogadjaje sa datumom i vremenom.

Kompajler (compiler.py) pretvara Course listu u IR.
ICS generator cita iz IR-a.
"""
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List

from .models import Course, Slot


@dataclass
class Event:
    """Jedno konkretno pojavljivanje termina u kalendaru."""
    uid: str                # jedinstveni ID (npr. "AB12-3@cru2cal")
    course: Course
    slot: Slot
    label: str              # "CM", "TD", "TP"
    start_dt: datetime      # datum + vrijeme pocetka (sa vremenskom zonom)
    end_dt: datetime

    @property
    def summary(self):
        return f"{self.label} de {self.course.code}"

    @property
    def description(self):
        return f"{self.label} de {self.course.code} en {self.slot.room}."

    @property
    def location(self):
        return self.slot.room


@dataclass
class CalendarModel:
    """Korijenski IR objekat: dogadjaji u periodu [start_date, end_date]."""
    start_date: date
    end_date: date
    timezone: str
    events: List[Event] = field(default_factory=list)
