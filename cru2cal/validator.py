"""
validator.py - Validacija rasporeda

Parser vec odbija duplikate unutar jednog predmeta. Ovdje se provjerava
ono sto parser ne vidi: da li dva razlicita predmeta koriste istu
prostoriju u istom danu u vremenima koja se preklapaju.

Koristi se u 'check' komandi.
"""
from collections import defaultdict


def find_room_conflicts(courses):
    """Pronalazi parove termina razlicitih predmeta koji se sudaraju.

    Uslov sudara: ista prostorija, isti dan i presjek vremenskih intervala.

    Vraca:
        lista (Course, Slot, Course, Slot) cetvorki, sortirana po
        prostoriji, danu i pocetku termina.
    """
    by_room_day = defaultdict(list)
    for course in courses:
        for slot in course.slots:
            by_room_day[(slot.room, slot.day)].append((course, slot))

    conflicts = []
    for key in sorted(by_room_day):
        entries = sorted(by_room_day[key], key=lambda e: (e[1].start_minutes,
                                                          e[1].end_minutes))
        for i, (course_a, slot_a) in enumerate(entries):
            for course_b, slot_b in entries[i + 1:]:
                # Sortirano po pocetku: nista dalje ne moze pocinjati prije kraja
                if slot_b.start_minutes >= slot_a.end_minutes:
                    break
                if course_a is course_b:
                    continue
                if slot_a.overlaps(slot_b):
                    conflicts.append((course_a, slot_a, course_b, slot_b))

    return conflicts


def format_conflict(conflict):
    course_a, slot_a, course_b, slot_b = conflict
    return (f"{slot_a.room} {slot_a.day}: {course_a.name} ({slot_a.time_range})"
            f" <-> {course_b.name} ({slot_b.time_range})")
