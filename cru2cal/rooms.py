"""
rooms.py - Upiti nad parsiranim rasporedom

Sve funkcije primaju listu Course objekata (izlaz iz CruParser-a) i
ne mijenjaju je. Konfiguracija (kodovi dana, radno vrijeme, broj minuta
u sedmici) dolazi od pozivatelja.

    course_rooms           - tipovi nastave i prostorije jednog predmeta
    room_capacity          - maksimalni kapacitet prostorije
    room_free_ranges       - slobodni intervali prostorije po danima
    free_rooms             - slobodne prostorije u datom danu i satu
    room_occupancy         - procenat zauzetosti prostorija
    rank_rooms_by_capacity - rang lista prostorija po kapacitetu
"""
from typing import Dict, List, Optional, Tuple

from .utils import parse_hour


def _iter_slots(courses):
    for course in courses:
        for slot in course.slots:
            yield course, slot


def all_rooms(courses) -> List[str]:
    """Sve prostorije koje se pojavljuju u rasporedu, redoslijedom prvog pojavljivanja."""
    seen = {}
    for _, slot in _iter_slots(courses):
        seen.setdefault(slot.room, None)
    return list(seen)


def find_course(courses, name):
    """Vraca predmet po nazivu (sa ili bez '+'). Baca ValueError ako ne postoji."""
    for course in courses:
        if name in (course.name, course.code):
            return course
    raise ValueError(f"Predmet '{name}' nije pronadjen.")


# ---------------------------------------------------------------------------
# Prostorije jednog predmeta i kapacitet
# ---------------------------------------------------------------------------

def course_rooms(courses, name) -> List[Tuple[str, str]]:
    """Vraca (tip_nastave, prostorija) parove za sve termine predmeta."""
    course = find_course(courses, name)
    return [(slot.session_type, slot.room) for slot in course.slots]


def room_capacity(courses, room) -> Optional[int]:
    """Najveci kapacitet od svih termina u prostoriji, None ako je nema."""
    capacities = [slot.capacity for _, slot in _iter_slots(courses) if slot.room == room]
    return max(capacities) if capacities else None


def rank_rooms_by_capacity(courses) -> List[Tuple[str, int]]:
    """Rang lista prostorija po kapacitetu (opadajuce).
    Kapacitet prostorije je kapacitet prvog termina u kojem se pojavljuje."""
    capacities = {}
    for _, slot in _iter_slots(courses):
        capacities.setdefault(slot.room, slot.capacity)
    return sorted(capacities.items(), key=lambda item: item[1], reverse=True)


# ---------------------------------------------------------------------------
# Slobodni termini
# ---------------------------------------------------------------------------

def _subtract(ranges, start, end):
    """Oduzima interval [start, end) od liste intervala."""
    result = []
    for r_start, r_end in ranges:
        if end <= r_start or start >= r_end:
            result.append((r_start, r_end))
            continue
        if start > r_start:
            result.append((r_start, start))
        if end < r_end:
            result.append((end, r_end))
    return result


def room_free_ranges(courses, room, days, opening) -> Optional[Dict[str, List[Tuple[int, int]]]]:
    """Slobodni intervali prostorije za svaki dan, u minutama od ponoci.

    Args:
        courses: lista Course objekata
        room: naziv prostorije (4 znaka)
        days: kodovi dana koji se razmatraju (npr. ["L", "MA", "ME", "J", "V"])
        opening: (pocetak, kraj) radnog vremena kao 'H:MM' stringovi

    Returns:
        {dan: [(pocetak, kraj), ...]} ili None ako se prostorija ne koristi.
    """
    occupied = [slot for _, slot in _iter_slots(courses) if slot.room == room]
    if not occupied:
        return None

    open_start, open_end = parse_hour(opening[0]), parse_hour(opening[1])
    free = {day: [(open_start, open_end)] for day in days}

    for slot in occupied:
        # Termin ciji kraj nije poslije pocetka ne zauzima nista
        if slot.day in free and slot.duration_minutes > 0:
            free[slot.day] = _subtract(free[slot.day], slot.start_minutes,
                                       slot.end_minutes)
    return free


def free_rooms(courses, day, hour) -> List[str]:
    """Prostorije koje nisu zauzete u datom danu i satu.
    Termin zauzima prostoriju od pocetka (ukljucivo) do kraja (iskljucivo)."""
    target = parse_hour(hour)
    busy = {
        slot.room for _, slot in _iter_slots(courses)
        if slot.day == day and slot.start_minutes <= target < slot.end_minutes
    }
    return [room for room in all_rooms(courses) if room not in busy]


# ---------------------------------------------------------------------------
# Zauzetost
# ---------------------------------------------------------------------------

def room_occupancy(courses, week_minutes) -> List[Tuple[str, float, int]]:
    """Vraca (prostorija, procenat, minute) sortirano po procentu opadajuce.

    week_minutes je ukupan broj raspolozivih minuta u sedmici."""
    if week_minutes <= 0:
        raise ValueError("Broj minuta u sedmici mora biti pozitivan.")

    usage = {}
    for _, slot in _iter_slots(courses):
        usage[slot.room] = usage.get(slot.room, 0) + max(slot.duration_minutes, 0)

    rates = [
        (room, used / week_minutes * 100, used)
        for room, used in usage.items()
    ]
    return sorted(rates, key=lambda item: item[1], reverse=True)
