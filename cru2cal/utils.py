"""
utils.py - Pomocne funkcije za cru2cal modul

Sadrzi:
    - is_cru_file / find_cru_files: pronalazenje .cru fajlova (rekurzivno)
    - load_sources: ucitavanje i spajanje vise .cru fajlova u jedan tekst
    - parse_hour / format_minutes: konverzija vremena 'H:MM' <-> minute
    - parse_date: datum iz 'YYYY-MM-DD' stringa
    - filter_courses: filtriranje predmeta po nazivu/prostoriji/danu/tipu
"""
import logging
import os
import re
from datetime import datetime

from .models import Course

logger = logging.getLogger(__name__)

CRU_EXTENSION = ".cru"

HOUR_RE = re.compile(r'^([0-9]{1,2}):([0-9]{2})$')
DATE_RE = re.compile(r'^[0-9]{4}-[0-9]{2}-[0-9]{2}$')


# ---------------------------------------------------------------------------
# Fajlovi
# ---------------------------------------------------------------------------

def is_cru_file(path):
    """Provjerava ekstenziju fajla (case-insensitive)."""
    return os.path.splitext(path)[1].lower() == CRU_EXTENSION


def find_cru_files(directory):
    """Vraca sortiranu listu svih .cru fajlova u direktoriju i poddirektorijima."""
    found = []
    for root, dirs, files in os.walk(directory):
        dirs.sort()
        for name in sorted(files):
            if is_cru_file(name):
                found.append(os.path.join(root, name))
    return found


def resolve_sources(path):
    """Pretvara putanju (fajl ili direktorij) u listu .cru fajlova.

    Baca FileNotFoundError ako putanja ne postoji."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"Putanja '{path}' ne postoji.")
    if os.path.isdir(path):
        return find_cru_files(path)
    return [path]


def load_sources(paths):
    """Ucitava vise fajlova i spaja ih u jedan tekst (novi red izmedju).

    Args:
        paths: lista putanja do .cru fajlova

    Returns:
        string sa spojenim sadrzajem svih fajlova
    """
    chunks = []
    for path in paths:
        logger.debug("Ucitavam %s", path)
        with open(path, 'r', encoding='utf-8') as f:
            chunks.append(f.read())
    return "\n".join(chunks)


# ---------------------------------------------------------------------------
# Vrijeme i datumi
# ---------------------------------------------------------------------------

def parse_hour(value):
    """Parsira 'H:MM' u minute od ponoci. Baca ValueError za neispravan unos."""
    match = HOUR_RE.match(value or "")
    if not match:
        raise ValueError(f"Neispravno vrijeme '{value}' (ocekivano H:MM).")
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise ValueError(f"Vrijeme '{value}' mora biti izmedju 00:00 i 23:59.")
    return hours * 60 + minutes


def format_minutes(minutes):
    """Primjer: 510 -> '8:30'"""
    return f"{minutes // 60}:{minutes % 60:02d}"


def parse_date(value):
    """Parsira datum u formatu YYYY-MM-DD. Baca ValueError za neispravan unos."""
    if not value or not DATE_RE.match(value):
        raise ValueError(f"Neispravan datum '{value}' (ocekivano YYYY-MM-DD).")
    return datetime.strptime(value, "%Y-%m-%d").date()


# ---------------------------------------------------------------------------
# Filtriranje predmeta
# ---------------------------------------------------------------------------

def filter_courses(courses, filters):
    """Filtrira predmete i njihove termine po regex obrascima.

    Filter 'course' se primjenjuje na naziv predmeta, a 'room', 'day' i
    'type' na pojedinacne termine. Predmet bez ijednog preostalog termina
    se izbacuje samo ako je aktivan neki filter termina. Vraca nove
    Course objekte; originalna lista ostaje netaknuta.

    Args:
        courses: lista Course objekata
        filters: dict sa kljucevima 'course', 'room', 'day', 'type'
                 (vrijednosti su regex obrasci ili None)
    """
    slot_filters = [
        (key, filters[key]) for key in ('room', 'day', 'type') if filters.get(key)
    ]
    attr = {'room': 'room', 'day': 'day', 'type': 'session_type'}

    result = []
    for course in courses:
        if filters.get('course') and not re.search(filters['course'], course.name,
                                                   re.IGNORECASE):
            continue

        slots = [
            slot for slot in course.slots
            if all(re.search(pattern, getattr(slot, attr[key]), re.IGNORECASE)
                   for key, pattern in slot_filters)
        ]
        if slot_filters and not slots:
            continue

        result.append(Course(course.name, slots))

    return result
