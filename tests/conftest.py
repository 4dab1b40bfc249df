import logging

import pytest

SAMPLE_CRU = """EDT.CRU - Emploi du temps
Seance de cours
Page generee en : 0.02 sec

+AP03
1,D1,P=25,H=J 10:00-12:00,F1,S=B101//
1,D2,P=24,H=J 13:00-15:00,F2,S=B101//
+GL02
1,C1,P=40,H=L 8:00-10:00,F1,S=A101//
1,T1,P=12,H=MA 14:00-16:00,F1,S=P202//
1,D1,P=30,H=V 10:00-12:00,FA,S=B101//
+MT01
1,C1,P=90,H=ME 8:00-10:00,F1,S=A101//
1,D1,P=30,H=J 11:00-13:00,F1,S=B103//
Page 1 sur 1
"""


@pytest.fixture
def sample_text():
    return SAMPLE_CRU


@pytest.fixture
def cru_file(tmp_path):
    path = tmp_path / "edt.cru"
    path.write_text(SAMPLE_CRU, encoding="utf-8")
    return path


@pytest.fixture
def data_dir(tmp_path):
    """Direktorij sa dva .cru fajla u poddirektorijima i jednim nevezanim fajlom."""
    root = tmp_path / "SujetA_data"
    (root / "AB").mkdir(parents=True)
    (root / "CD").mkdir(parents=True)
    (root / "AB" / "edt.cru").write_text(
        "+AP03\n1,D1,P=25,H=J 10:00-12:00,F1,S=B101//\n", encoding="utf-8")
    (root / "CD" / "edt.cru").write_text(
        "+CD01\n1,C1,P=60,H=L 8:00-10:00,F1,S=A101//\n"
        "1,T1,P=16,H=J 14:00-16:00,F1,S=B101//\n", encoding="utf-8")
    (root / "CD" / "notes.txt").write_text("+IGNORED\n", encoding="utf-8")
    return root


@pytest.fixture(autouse=True)
def restore_root_logger():
    """CLI mijenja handlere root loggera; vracamo ih nakon svakog testa."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
