import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from roadtrip.graph import BorderGraph  # noqa: E402
from roadtrip.roadtrip import RoadTrip  # noqa: E402

BORDERS_TXT = """\
France = Spain 646 km; Belgium 556 km; Germany 418 km; Andorra 55 km; Switzerland 525 km
Spain = Andorra 118 km; Portugal 1,224 km; Gibraltar 1.2 km
Germany = Belgium 133 km; Switzerland 348 km; Poland 447 km
Portugal
United States = Canada 8,893 km; Mexico 3,111 km
Turkey = Greece 192 km
Iceland =
"""

CAPDIST_CSV = """\
numa,ida,numb,idb,kmdist,midist
2,USA,20,CAN,737,458
20,CAN,2,USA,737,458
220,FRN,230,SPN,1053,654
220,FRN
1,2,3,4,5,6,7
"""

STATE_NAME_TSV = (
    "statenum\tstateid\tcountryname\tstart\tend\n"
    "2\tUSA\tUnited States of America\t1816-01-01\t2016-12-31\n"
    "20\tCAN\tCanada\t1920-01-10\t2016-12-31\n"
    "220\tFRN\tFrance\t1816-01-01\t2016-12-31\n"
    "230\tSPN\tSpain\t1816-01-01\t2016-12-31\n"
)


@pytest.fixture
def triangle():
    """A–B 100, B–C 50, A–C 200, plus an isolated D."""
    return BorderGraph.build([
        ("A", [("B", 100), ("C", 200)]),
        ("B", [("C", 50)]),
        ("D", []),
    ])


@pytest.fixture
def dataset_files(tmp_path):
    borders = tmp_path / "borders.txt"
    capdist = tmp_path / "capdist.csv"
    state_names = tmp_path / "state_name.tsv"
    borders.write_text(BORDERS_TXT, encoding="utf-8")
    capdist.write_text(CAPDIST_CSV, encoding="utf-8")
    state_names.write_text(STATE_NAME_TSV, encoding="utf-8")
    return borders, capdist, state_names


@pytest.fixture
def trip(dataset_files):
    return RoadTrip.from_files(*dataset_files)
