"""
lexer.py - Leksicka analiza CRU formata

Dijeli sirovi tekst na linije i zadrzava samo one koje su kandidati
za parsiranje:
    - linije koje pocinju markerom predmeta ('+')
    - linije koje odgovaraju gramatici termina (creneau)

Sve ostale linije (prazne, komentari, nevezan tekst) se tiho odbacuju.
To nisu greske, nego sum. Filtriranje je idempotentno i bez sporednih
efekata.

Gramaticke konstante su izdvojene u imenovana polja da bi ugovor
formata ostao doslovno isti na svim mjestima koja ga koriste.
"""
import re

# Marker kojim pocinje linija sa nazivom predmeta
COURSE_MARKER = "+"

# Naziv predmeta: '+' pa velika slova i cifre, cijela linija
COURSE_NAME_PATTERN = r"^\+[A-Z0-9]+$"

# Cifre su samo ASCII [0-9] (\d bi prihvatio i druge Unicode cifre)
# Termin: grupe redom -> tip, kapacitet, dan, vrijeme, podgrupa, prostorija
SLOT_PATTERN = (
    r"^1,([A-Z0-9]+),P=([0-9]+),H=([A-Z]+)\s([0-9]{1,2}:[0-9]{2}-[0-9]{1,2}:[0-9]{2}),"
    r"F([A-Z0-9]+),S=([A-Z0-9]{4})//"
)

COURSE_NAME_RE = re.compile(COURSE_NAME_PATTERN)
SLOT_RE = re.compile(SLOT_PATTERN)

LINE_SPLIT_RE = re.compile(r"\r?\n")


class Line:
    """Jedna filtrirana linija sa tipom, vrijednoscu i brojem linije."""
    def __init__(self, type, value, number):
        self.type = type
        self.value = value
        self.number = number

    def startswith(self, prefix):
        return self.value.startswith(prefix)

    def __str__(self):
        return self.value

    def __eq__(self, other):
        if isinstance(other, Line):
            return (self.type, self.value, self.number) == \
                (other.type, other.value, other.number)
        return NotImplemented

    def __repr__(self):
        return f"Line({self.type}, {self.value!r}, line={self.number})"


class Lexer:
    """Filter linija za CRU format.

    Pravila su lista (naziv, predikat) parova. Linija se zadrzava ako je
    prihvati prvo pravilo koje je prepozna; redoslijed je bitan jer
    naziv predmeta ima prednost nad terminom."""

    RULES = [
        # Kandidat za naziv predmeta (gramatika se provjerava u parseru)
        ('COURSE', lambda line: line.startswith(COURSE_MARKER)),

        # Termin koji odgovara punoj gramatici
        ('SLOT',   lambda line: SLOT_RE.match(line) is not None),
    ]

    def __init__(self, text):
        """Filtrira ulazni tekst u niz Line objekata."""
        self.lines = []

        for number, raw in enumerate(LINE_SPLIT_RE.split(text), start=1):
            # Prazne linije nikad ne ulaze u niz
            if not raw.strip():
                continue
            for kind, accepts in self.RULES:
                if accepts(raw):
                    self.lines.append(Line(kind, raw, number))
                    break


def filter_relevant_lines(text):
    """Vraca filtrirane linije kao obicne stringove, redoslijedom iz ulaza."""
    return [line.value for line in Lexer(text).lines]

