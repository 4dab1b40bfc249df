"""
cru2cal - Parser i alati za raspored nastave u CRU formatu

Pipeline:  .cru fajl -> Lexer -> CruParser -> Course/Slot model
           -> upiti (rooms) / CalendarCompiler -> IR -> Generatori

Modul ne sadrzi nikakve podrazumijevane vrijednosti (kodovi dana, tipovi
nastave, radno vrijeme, vremenska zona). Sva konfiguracija dolazi iz
pozivatelja (cruedt.py).
"""
