"""
models.py - Model podataka CRU rasporeda

Definise entitete koji nastaju kao rezultat parsiranja .cru fajlova:
    Course      - jedan predmet/grupa (linija "+NAZIV")
    Slot        - jedan termin predmeta (linija "1,C1,P=30,H=L 8:00-10:00,...")
    Diagnostic  - jedna odbijena linija sa vrstom i porukom greske
    ParseContext - kontekst parsiranja (trenutni predmet)
"""
from dataclasses import dataclass, field
from typing import List, Optional

from .lexer import COURSE_MARKER


# ---------------------------------------------------------------------------
# Vrste gresaka (sve su nefatalne, parser ih samo broji i biljezi)
# ---------------------------------------------------------------------------
STRUCTURAL_ERROR = "StructuralError"
SLOT_GRAMMAR_ERROR = "SlotGrammarError"
ORPHAN_SLOT_ERROR = "OrphanSlotError"
DUPLICATE_SLOT_ERROR = "DuplicateSlotError"

ERROR_KINDS = (
    STRUCTURAL_ERROR,
    SLOT_GRAMMAR_ERROR,
    ORPHAN_SLOT_ERROR,
    DUPLICATE_SLOT_ERROR,
)


def time_to_minutes(value):
    """Pretvara 'H:MM' ili 'HH:MM' u broj minuta od ponoci.
    Primjer: '8:30' -> 510"""
    hours, minutes = value.strip().split(":")
    return int(hours) * 60 + int(minutes)


# ---------------------------------------------------------------------------
# Termin (creneau)
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Slot:
    """Jedan termin predmeta.

    time_range cuva doslovan tekst iz ulaza ('8:00-10:00'), a pocetak i kraj
    u minutama se racunaju na zahtjev (koriste ih upiti i kompajler)."""
    session_type: str   # "C1", "D1", "T1", ...
    capacity: int       # broj mjesta (P=)
    day: str            # "L", "MA", "ME", "J", "V", "S"
    time_range: str     # "8:00-10:00"
    group: str          # podgrupa (F...)
    room: str           # tacno 4 znaka (S=)

    @property
    def key(self):
        """Trojka (dan, vrijeme, prostorija) koja mora biti jedinstvena
        unutar jednog predmeta."""
        return (self.day, self.time_range, self.room)

    @property
    def start(self):
        return self.time_range.split("-")[0]

    @property
    def end(self):
        return self.time_range.split("-")[1]

    @property
    def start_minutes(self):
        return time_to_minutes(self.start)

    @property
    def end_minutes(self):
        return time_to_minutes(self.end)

    @property
    def duration_minutes(self):
        return self.end_minutes - self.start_minutes

    def overlaps(self, other):
        """Da li se dva termina preklapaju (isti dan, presjek vremena)."""
        return (self.day == other.day and
                other.start_minutes < self.end_minutes and
                other.end_minutes > self.start_minutes)

    def to_dict(self):
        return {
            "type": self.session_type,
            "capacity": self.capacity,
            "day": self.day,
            "time": self.time_range,
            "group": self.group,
            "room": self.room,
        }


# ---------------------------------------------------------------------------
# Predmet
# ---------------------------------------------------------------------------
@dataclass
class Course:
    """Predmet sa nazivom (ukljucujuci '+' prefiks) i listom termina.

    Termini se dodaju iskljucivo kroz parser, redoslijedom pojavljivanja
    u ulazu."""
    name: str
    slots: List[Slot] = field(default_factory=list)

    @property
    def code(self):
        """Naziv bez markera: '+AB12' -> 'AB12'."""
        if self.name.startswith(COURSE_MARKER):
            return self.name[len(COURSE_MARKER):]
        return self.name

    def find_slot(self, day, time_range, room):
        """Vraca postojeci termin sa istom trojkom ili None."""
        for slot in self.slots:
            if slot.key == (day, time_range, room):
                return slot
        return None

    def add_slot(self, slot):
        self.slots.append(slot)

    def to_dict(self):
        return {
            "name": self.name,
            "slots": [s.to_dict() for s in self.slots],
        }


# ---------------------------------------------------------------------------
# Dijagnostika i kontekst parsiranja
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Diagnostic:
    """Jedna odbijena linija: vrsta greske, poruka i originalni ulaz."""
    kind: str
    message: str
    line: str
    line_number: Optional[int] = None

    def __str__(self):
        return f'Parsing Error ! on "{self.line}" -- msg : {self.message}'


@dataclass
class ParseContext:
    """Kontekst koji parser prosljedjuje kroz korake state machine-a.
    current je predmet kojem se dodaju novi termini (None = nema ga)."""
    current: Optional[Course] = None
