"""
parser.py - Sintaksna analiza CRU formata

Prima filtrirani niz linija iz Lexer-a i gradi listu Course objekata,
svaki sa svojim Slot terminima.

State machine:
    ocekuje naziv predmeta -> ocekuje termin ili sljedeci naziv -> ... -> kraj

Nijedna greska nije fatalna. Svaka odbijena linija povecava brojac gresaka
i upisuje se u listu dijagnostika. Ako je show_errors ukljucen, poruka se
i loguje. Parser uvijek zavrsava i vraca sve sto je uspio izgraditi.
"""
import logging

from .lexer import COURSE_MARKER, COURSE_NAME_RE, SLOT_RE, Lexer
from .models import (
    DUPLICATE_SLOT_ERROR,
    ORPHAN_SLOT_ERROR,
    SLOT_GRAMMAR_ERROR,
    STRUCTURAL_ERROR,
    Course,
    Diagnostic,
    ParseContext,
    Slot,
)

logger = logging.getLogger(__name__)


class CruParser:
    """Rekurzivni parser za CRU format.

    Instanca drzi listu predmeta, brojac gresaka i dijagnostike.
    Stanje se akumulira kroz vise poziva parse() sve do reset().
    Dva paralelna parsiranja traze dvije instance."""

    def __init__(self, show_errors=True):
        self.show_errors = show_errors
        self.courses = []
        self.diagnostics = []

    @property
    def error_count(self):
        return len(self.diagnostics)

    def reset(self):
        """Brise akumulirane predmete i greske."""
        self.courses = []
        self.diagnostics = []

    # ------------------------------------------------------------------
    # Ulazne tacke
    # ------------------------------------------------------------------

    def parse(self, text):
        """Filtrira i parsira sirovi tekst. Vraca listu predmeta."""
        return self.parse_lines(Lexer(text).lines)

    def parse_lines(self, lines):
        """Parsira vec pripremljen niz linija (str ili Line), bez filtriranja."""
        remaining = list(lines)
        context = ParseContext()
        while remaining:
            self.course(remaining, context)
        return self.courses

    def summary(self):
        return f"Parsing completed with {self.error_count} error(s)."

    # ------------------------------------------------------------------
    # Pomocne metode
    # ------------------------------------------------------------------

    def peek(self, lines):
        """Vraca sljedecu liniju bez konzumiranja (None na kraju ulaza)."""
        return lines[0] if lines else None

    def consume(self, lines):
        return lines.pop(0)

    def error(self, kind, message, line):
        """Biljezi jednu odbijenu liniju."""
        diagnostic = Diagnostic(
            kind=kind,
            message=message,
            line=str(line),
            line_number=getattr(line, 'number', None),
        )
        self.diagnostics.append(diagnostic)
        if self.show_errors:
            logger.warning(str(diagnostic))
        return diagnostic

    # ------------------------------------------------------------------
    # Koraci state machine-a
    # ------------------------------------------------------------------

    def course(self, lines, context):
        """Parsira jedan blok: naziv predmeta pa sve termine do sljedeceg naziva."""
        line = self.consume(lines)

        if not str(line).startswith(COURSE_MARKER):
            self.error(STRUCTURAL_ERROR,
                       "Expected course name but got something else", line)
            return

        if not self.name(line, context):
            # Ostajemo u stanju "ocekuje naziv predmeta"
            return

        while lines and not str(self.peek(lines)).startswith(COURSE_MARKER):
            self.slot(self.consume(lines), context)

    def name(self, line, context):
        """Validira naziv predmeta i postavlja ga kao trenutni predmet.
        Vraca kreirani Course ili None."""
        value = str(line)
        if not COURSE_NAME_RE.match(value):
            self.error(STRUCTURAL_ERROR, "Invalid course name format", line)
            # Termini nakon neispravnog naziva ne smiju pripasti prethodnom predmetu
            context.current = None
            return None

        course = Course(value)
        self.courses.append(course)
        context.current = course
        return course

    def slot(self, line, context):
        """Validira liniju termina i dodaje termin trenutnom predmetu."""
        match = SLOT_RE.match(str(line))
        if not match:
            self.error(SLOT_GRAMMAR_ERROR, "Invalid creneau format", line)
            return None

        session_type, capacity, day, time_range, group, room = match.groups()
        slot = Slot(
            session_type=session_type,
            capacity=int(capacity, 10),
            day=day,
            time_range=time_range,
            group=group,
            room=room,
        )
        return self.add_slot(context, slot, line)

    def add_slot(self, context, slot, line=""):
        """Dodaje termin predmetu iz konteksta uz provjeru duplikata.
        Prvi termin za trojku (dan, vrijeme, prostorija) pobjedjuje."""
        course = context.current
        if course is None:
            self.error(ORPHAN_SLOT_ERROR,
                       "Creneau found without an associated course", line)
            return None

        if course.find_slot(slot.day, slot.time_range, slot.room):
            self.error(
                DUPLICATE_SLOT_ERROR,
                f"Duplicate creneau found for salle {slot.room}"
                f" at {slot.day} {slot.time_range}",
                line,
            )
            return None

        course.add_slot(slot)
        return slot
