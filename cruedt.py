#!/usr/bin/env python3
"""
cruedt.py - Alat za raspored nastave u CRU formatu (emploi du temps)

Ovaj fajl je glavni ulazni punkt za rad sa .cru rasporedima.
Sva podrazumijevana konfiguracija (kodovi dana, tipovi nastave, radno
vrijeme, vremenska zona, direktorij sa podacima) se definise ovdje.
Modul cru2cal/ je apstraktan i ne sadrzi defaulte.

Hijerarhija konfiguracije:
    1. CLI argumenti (najjaci prioritet)
    2. Konstante iz ovog fajla (fallback)

Komande:
    check                provjera sintakse i ispis parsiranih predmeta
    get-classroom        tipovi nastave i prostorije jednog predmeta
    get-capacity         kapacitet prostorije
    get-slots            slobodni termini prostorije kroz sedmicu
    get-free-classrooms  slobodne prostorije u datom danu i satu
    generate-occupancy   zauzetost prostorija
    rank-classrooms      rang lista prostorija po kapacitetu
    get-calendar         iCalendar fajl za listu predmeta
"""

import argparse
import logging
import os
import signal
import sys

from cru2cal.compiler import CalendarCompiler
from cru2cal.exporter import Exporter
from cru2cal.generators import (
    ChartGenerator,
    ICSCalendarGenerator,
    JSONScheduleGenerator,
    MarkdownReportGenerator,
)
from cru2cal.parser import CruParser
from cru2cal.rooms import (
    course_rooms,
    find_course,
    free_rooms,
    rank_rooms_by_capacity,
    room_capacity,
    room_free_ranges,
    room_occupancy,
)
from cru2cal.utils import (
    filter_courses,
    format_minutes,
    is_cru_file,
    load_sources,
    parse_date,
    resolve_sources,
)
from cru2cal.validator import find_room_conflicts, format_conflict


# ---------------------------------------------------------------------------
# Podrazumijevana konfiguracija
# ---------------------------------------------------------------------------
# Kodovi dana iz H= polja, redom kroz sedmicu.
# Broj je dan u sedmici po datetime.weekday() (ponedjeljak = 0).
DAYS = {
    "L":  ("lundi", 0),
    "MA": ("mardi", 1),
    "ME": ("mercredi", 2),
    "J":  ("jeudi", 3),
    "V":  ("vendredi", 4),
    "S":  ("samedi", 5),
}
DAY_LABELS = {code: label for code, (label, _) in DAYS.items()}
WEEKDAYS = {code: number for code, (_, number) in DAYS.items()}

# Dani za koje se traze slobodni termini (get-slots)
WORKING_DAYS = ["L", "MA", "ME", "J", "V"]

# Tipovi nastave koji ulaze u kalendar i njihove oznake
SESSION_TYPES = {
    "C1": "CM",
    "D1": "TD",
    "T1": "TP",
}

# Radno vrijeme prostorija (get-slots)
OPENING_HOURS = ("8:00", "18:00")

# Ukupno raspolozivih minuta u sedmici za racunanje zauzetosti (5 dana x 8h)
OCCUPANCY_WEEK_MINUTES = 5 * 8 * 60

DATA_DIR = "SujetA_data"
TIMEZONE = "Europe/Paris"
CALENDAR_FILE = "emploi_du_temps.ics"

# Izlazni kodovi
EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_PARSE_ERRORS = 2


def setup_logging(level=logging.INFO, log_file=None):
    """Konfigurise root logger: poruke na stderr, opcionalno i u fajl."""
    logger = logging.getLogger()
    logger.setLevel(level)
    if logger.hasHandlers():
        logger.handlers.clear()

    ch = logging.StreamHandler(sys.stderr)
    ch.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(ch)

    if log_file:
        fh = logging.FileHandler(log_file, encoding='utf-8')
        fh.setFormatter(logging.Formatter('%(asctime)s [%(levelname)s] %(message)s'))
        logger.addHandler(fh)
    return logger


def build_arg_parser():
    parser = argparse.ArgumentParser(
        description="Alat za raspored nastave u CRU formatu."
    )

    # Logovanje
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Detaljan ispis (DEBUG)")
    parser.add_argument("-q", "--quiet", action="store_true",
                        help="Ispisuj samo greske")
    parser.add_argument("--log-file", help="Dodatno loguj u ovaj fajl")
    parser.add_argument("--data-dir", default=DATA_DIR,
                        help=f"Direktorij sa .cru fajlovima (default: {DATA_DIR})")

    sub = parser.add_subparsers(dest="command", required=True)

    # check
    p = sub.add_parser("check", help="Provjeri sintaksu CRU fajla i ispisi parsirane podatke")
    p.add_argument("file", help="Putanja do .cru fajla")
    p.add_argument("--hide-errors", dest="show_errors", action="store_false",
                   help="Ne ispisuj pojedinacne greske parsiranja")
    p.add_argument("--strict", action="store_true",
                   help=f"Izlazni kod {EXIT_PARSE_ERRORS} ako postoji ijedna greska")
    p.add_argument("-j", "--json", help="Putanja za JSON izlaz (umjesto stdout)")
    p.add_argument("-m", "--md", help="Putanja za Markdown izvjestaj")
    p.add_argument("-e", "--export",
                   help="Direktorij za eksport kanonskog CRU koda i odbijenih linija")
    p.add_argument("--course", help="Filtriraj po predmetu (regex)")
    p.add_argument("--room", help="Filtriraj po prostoriji (regex)")
    p.add_argument("--day", help="Filtriraj po danu (regex)")
    p.add_argument("--type", help="Filtriraj po tipu nastave (regex)")

    # get-classroom
    p = sub.add_parser("get-classroom", help="Tipovi nastave i prostorije predmeta")
    p.add_argument("file", help="Putanja do .cru fajla")
    p.add_argument("course", help="Naziv predmeta (npr. +AB12)")

    # get-capacity
    p = sub.add_parser("get-capacity", help="Kapacitet prostorije")
    p.add_argument("file", help="Putanja do .cru fajla")
    p.add_argument("room", help="Naziv prostorije (npr. B103)")

    # get-slots
    p = sub.add_parser("get-slots", help="Kada je prostorija slobodna")
    p.add_argument("room", help="Naziv prostorije")
    p.add_argument("--file", help="Fajl ili direktorij (default: --data-dir)")

    # get-free-classrooms
    p = sub.add_parser("get-free-classrooms",
                       help="Slobodne prostorije u datom danu i satu")
    p.add_argument("day", help=f"Dan ({', '.join(DAYS)})")
    p.add_argument("hour", help="Sat, H:MM (npr. 10:00)")
    p.add_argument("--file", help="Fajl ili direktorij (default: --data-dir)")

    # generate-occupancy
    p = sub.add_parser("generate-occupancy", help="Zauzetost prostorija")
    p.add_argument("file", help="Putanja do .cru fajla")
    p.add_argument("--html", help="Putanja za HTML grafikon")

    # rank-classrooms
    p = sub.add_parser("rank-classrooms", help="Rang lista prostorija po kapacitetu")
    p.add_argument("file", help="Putanja do .cru fajla")
    p.add_argument("--html", help="Putanja za HTML grafikon")

    # get-calendar
    p = sub.add_parser("get-calendar", help="iCalendar fajl za listu predmeta")
    p.add_argument("start", help="Pocetni datum, YYYY-MM-DD")
    p.add_argument("end", help="Krajnji datum, YYYY-MM-DD")
    p.add_argument("courses", nargs="+", help="Predmeti studenta")
    p.add_argument("--output-path", default=CALENDAR_FILE,
                   help=f"Putanja za .ics fajl (default: {CALENDAR_FILE})")
    p.add_argument("--file", help="Fajl ili direktorij (default: --data-dir)")
    p.add_argument("--timezone", default=TIMEZONE,
                   help=f"Vremenska zona (default: {TIMEZONE})")

    return parser


def main(argv=None):
    args = build_arg_parser().parse_args(argv)

    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    setup_logging(level, args.log_file)

    handler = COMMANDS[args.command]
    try:
        return handler(args)
    except (ValueError, OSError) as e:
        logging.error(f"Greska: {e}")
        return EXIT_FAILURE


# ---------------------------------------------------------------------------
# Ucitavanje i parsiranje
# ---------------------------------------------------------------------------

def _require_cru_file(path):
    if not is_cru_file(path):
        raise ValueError(f"Fajl '{path}' nije validan .cru fajl.")
    return path


def _parse(paths, show_errors=True):
    """Ucitava fajlove, parsira ih jednim parserom i vraca parser."""
    parser = CruParser(show_errors=show_errors)
    parser.parse(load_sources(paths))
    logging.debug(parser.summary())
    return parser


def _parse_source(args, show_errors=True):
    """Parsira --file (fajl ili direktorij) ili, ako nije dat, --data-dir."""
    paths = resolve_sources(args.file or args.data_dir)
    if not paths:
        raise ValueError("Nije pronadjen nijedan .cru fajl.")
    return _parse(paths, show_errors)


# ---------------------------------------------------------------------------
# Komande
# ---------------------------------------------------------------------------

def cmd_check(args):
    parser = _parse([_require_cru_file(args.file)], args.show_errors)
    print(parser.summary(), file=sys.stderr)

    filters = {
        'course': args.course,
        'room': args.room,
        'day': args.day,
        'type': args.type,
    }
    courses = parser.courses
    active_filters = {k: v for k, v in filters.items() if v}
    if active_filters:
        courses = filter_courses(courses, filters)
        print(f"Primijenjeni filteri: {active_filters}", file=sys.stderr)

    json_gen = JSONScheduleGenerator(courses)
    if args.json:
        json_gen.write(args.json)
        print(f"Generisan JSON: {args.json}", file=sys.stderr)
    else:
        print(json_gen.dumps())

    if args.md:
        md_gen = MarkdownReportGenerator(courses, DAY_LABELS, SESSION_TYPES)
        with open(args.md, 'w', encoding='utf-8') as f:
            f.write(md_gen.generate())
        print(f"Generisan Markdown: {args.md}", file=sys.stderr)

    if args.export:
        Exporter(parser, args.export).export()

    conflicts = find_room_conflicts(parser.courses)
    if conflicts:
        logging.warning(f"Pronadjeno {len(conflicts)} preklapanja prostorija:")
        for conflict in conflicts:
            logging.warning(f"  {format_conflict(conflict)}")

    if args.strict and parser.error_count:
        return EXIT_PARSE_ERRORS
    return EXIT_OK


def cmd_get_classroom(args):
    parser = _parse([_require_cru_file(args.file)])
    rooms = course_rooms(parser.courses, args.course)

    if not rooms:
        print(f'Nema termina za predmet "{args.course}".')
        return EXIT_OK

    print(f'Termini predmeta "{args.course}":')
    for index, (session_type, room) in enumerate(rooms, start=1):
        print(f"Slot {index}: Type - {session_type}, Classroom - {room}")
    return EXIT_OK


def cmd_get_capacity(args):
    parser = _parse([_require_cru_file(args.file)], show_errors=False)
    capacity = room_capacity(parser.courses, args.room)

    if capacity is None:
        print(f"Nema podataka za prostoriju {args.room}.")
    else:
        print(f"Kapacitet prostorije {args.room}: {capacity} mjesta.")
    return EXIT_OK


def cmd_get_slots(args):
    parser = _parse_source(args)
    free = room_free_ranges(parser.courses, args.room, WORKING_DAYS, OPENING_HOURS)

    if free is None:
        print(f'Nema termina za prostoriju "{args.room}". Provjerite naziv.')
        return EXIT_OK

    for day in WORKING_DAYS:
        label = DAY_LABELS[day]
        if free[day]:
            print(f"Slobodni termini, {label}:")
            for start, end in free[day]:
                print(f"       -> od {format_minutes(start)} do {format_minutes(end)}")
        else:
            print(f"Nema slobodnih termina, {label}.")
    return EXIT_OK


def cmd_get_free_classrooms(args):
    day = args.day.upper()
    if day not in DAYS:
        raise ValueError(f'Neispravan dan "{args.day}" (dozvoljeno: {", ".join(DAYS)}).')

    parser = _parse_source(args)
    rooms = free_rooms(parser.courses, day, args.hour)

    if rooms:
        print(f"Slobodne prostorije, {DAY_LABELS[day]} u {args.hour}:")
        for room in rooms:
            print(f"- {room}")
    else:
        print(f"Nema slobodnih prostorija, {DAY_LABELS[day]} u {args.hour}.")
    return EXIT_OK


def cmd_generate_occupancy(args):
    parser = _parse([_require_cru_file(args.file)])
    occupancy = room_occupancy(parser.courses, OCCUPANCY_WEEK_MINUTES)

    print("Zauzetost prostorija:")
    for room, rate, used in occupancy:
        print(f"{room}: {rate:.2f}% ({used} minuta)")

    if args.html:
        chart = ChartGenerator(
            [(room, rate) for room, rate, _ in occupancy],
            title="Zauzetost prostorija",
            value_label="Zauzetost",
            unit="%",
            max_value=100,
        )
        chart.write(args.html)
        print(f"Generisan HTML grafikon: {args.html}", file=sys.stderr)
    return EXIT_OK


def cmd_rank_classrooms(args):
    parser = _parse([_require_cru_file(args.file)])
    ranking = rank_rooms_by_capacity(parser.courses)

    print("\nRang lista prostorija po kapacitetu:")
    print("---------------------------------")
    print("| Capacity | Rooms              |")
    print("---------------------------------")
    for room, capacity in ranking:
        print(f"| {str(capacity).rjust(8)} | {room.ljust(18)} |")
    print("---------------------------------")

    if args.html:
        chart = ChartGenerator(ranking, title="Kapacitet prostorija",
                               value_label="Kapacitet")
        chart.write(args.html)
        print(f"Generisan HTML grafikon: {args.html}", file=sys.stderr)
    return EXIT_OK


def cmd_get_calendar(args):
    start = parse_date(args.start)
    end = parse_date(args.end)

    parser = _parse_source(args)
    missing = []
    selected = []
    for name in args.courses:
        try:
            selected.append(find_course(parser.courses, name))
        except ValueError:
            missing.append(name)
    if missing:
        raise ValueError(f"Nepoznati predmeti: {', '.join(missing)}")

    compiler = CalendarCompiler(selected, start, end, WEEKDAYS, SESSION_TYPES,
                                args.timezone)
    model = compiler.compile()

    output_dir = os.path.dirname(args.output_path)
    if output_dir and not os.path.exists(output_dir):
        os.makedirs(output_dir)
    ICSCalendarGenerator(model).generate(args.output_path)
    print(f"Generisan ICS: {args.output_path} ({len(model.events)} dogadjaja)",
          file=sys.stderr)
    return EXIT_OK


COMMANDS = {
    "check": cmd_check,
    "get-classroom": cmd_get_classroom,
    "get-capacity": cmd_get_capacity,
    "get-slots": cmd_get_slots,
    "get-free-classrooms": cmd_get_free_classrooms,
    "generate-occupancy": cmd_generate_occupancy,
    "rank-classrooms": cmd_rank_classrooms,
    "get-calendar": cmd_get_calendar,
}


if __name__ == "__main__":
    # Omogucava cist izlaz pri pipe-anju (npr. | head, | grep)
    signal.signal(signal.SIGPIPE, signal.SIG_DFL)
    sys.exit(main())
