"""
generators - Izlazni generatori za CRU raspored

Dostupni generatori:
    JSONScheduleGenerator   - JSON ispis parsiranih predmeta (check komanda)
    MarkdownReportGenerator - Markdown izvjestaj po predmetima
    ICSCalendarGenerator    - iCalendar (.ics) fajl iz kalendarskog IR-a
    ChartGenerator          - HTML grafikon (zauzetost, kapacitet prostorija)
"""
from .html_gen import ChartGenerator
from .ics_gen import ICSCalendarGenerator
from .json_gen import JSONScheduleGenerator
from .md_gen import MarkdownReportGenerator
