"""
exporter.py - Eksport parsiranog modela nazad u CRU format

Generise:
    edt.cru        - svi prihvaceni predmeti i termini u kanonskom obliku
    rejected.cru   - linije koje je parser odbio, svaka sa komentarom greske

edt.cru se moze ponovo parsirati bez ijedne greske.
"""
import logging
import os

logger = logging.getLogger(__name__)


def format_slot(slot):
    """Termin u kanonskoj CRU liniji."""
    return (f"1,{slot.session_type},P={slot.capacity},H={slot.day} {slot.time_range},"
            f"F{slot.group},S={slot.room}//")


class Exporter:
    """Eksportuje rezultat CruParser-a u .cru fajlove."""

    def __init__(self, parser, output_dir):
        self.parser = parser
        self.output_dir = output_dir.rstrip('/')

    def export(self):
        """Glavni metod: eksportuje sve fajlove. Vraca listu zapisanih putanja."""
        if not os.path.exists(self.output_dir):
            os.makedirs(self.output_dir)

        written = []
        path = os.path.join(self.output_dir, "edt.cru")
        self._write_file(path, self._gen_courses())
        written.append(path)

        if self.parser.diagnostics:
            path = os.path.join(self.output_dir, "rejected.cru")
            self._write_file(path, self._gen_rejected())
            written.append(path)
            logger.warning("Pronadjeno %d odbijenih linija. Pogledajte '%s'.",
                           self.parser.error_count, path)

        logger.info("Eksportovano u: %s/", self.output_dir)
        return written

    def _write_file(self, path, content):
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)

    def _gen_courses(self):
        lines = []
        for course in self.parser.courses:
            lines.append(course.name)
            lines.extend(format_slot(slot) for slot in course.slots)
        return "\n".join(lines) + "\n"

    def _gen_rejected(self):
        lines = ["// ODBIJENE LINIJE"]
        for diag in self.parser.diagnostics:
            where = f" (linija {diag.line_number})" if diag.line_number else ""
            lines.append(f"// {diag.kind}{where}: {diag.message}")
            lines.append(diag.line)
        return "\n".join(lines) + "\n"
