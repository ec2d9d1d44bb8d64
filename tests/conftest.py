import json
from pathlib import Path

import pytest

from ags_kit.buffers import InMemoryBuffer
from ags_kit.parsers import AgsParser, ParsedDocument

# Line numbers are referenced by the tests; keep them stable.
SAMPLE_AGS = """\
"GROUP","PROJ"
"HEADING","PROJ_ID","PROJ_NAME"
"UNIT","",""
"TYPE","ID","X"
"DATA","P001","Ring Road"

"GROUP","TRAN"
"HEADING","TRAN_ISNO","TRAN_AGS"
"UNIT","",""
"TYPE","X","X"
"DATA","1","4.1.1"

"GROUP","LOCA"
"HEADING","LOCA_ID","LOCA_TYPE","LOCA_NATE","LOCA_NATN","LOCA_FDEP"
"UNIT","","","m","m","m"
"TYPE","ID","PA","2DP","2DP","2DP"
"DATA","BH1","BH","523145.00","178456.00","3.00"
"DATA","BH2","BH","523160.00","178470.00","5.00"
"DATA","TP1","TP","523170.00","178480.00","1.20"

"GROUP","GEOL"
"HEADING","LOCA_ID","GEOL_TOP","GEOL_BASE","GEOL_DESC"
"UNIT","","m","m",""
"TYPE","ID","2DP","2DP","X"
"DATA","BH1","0.00","1.50","Topsoil"
"DATA","BH1","1.50","3.00","Clay"
"DATA","BH2","0.00","5.00","Sand"
"DATA","TP1","0.00","n/a","Made ground"
"""

SAMPLE_DICTIONARY = [
    {
        "GROUP": "DICT",
        "HEADING": [
            "DICT_TYPE",
            "DICT_GRP",
            "DICT_HDNG",
            "DICT_STAT",
            "DICT_DTYP",
            "DICT_DESC",
            "DICT_UNIT",
            "DICT_EXMP",
        ],
        "UNIT": ["", "", "", "", "", "", "", ""],
        "TYPE": ["PA", "X", "X", "PA", "PA", "X", "PU", "X"],
        "DATA": [
            ["GROUP", "LOCA", "", "", "", "Location Details", "", ""],
            ["GROUP", "GEOL", "", "", "", "Field Geological Descriptions", "", ""],
            ["HEADING", "LOCA", "LOCA_ID", "KEY", "ID", "Location identifier", "", "BH1"],
            ["HEADING", "LOCA", "LOCA_FDEP", "", "2DP", "Final depth", "m", "25.00"],
            ["HEADING", "GEOL", "GEOL_TOP", "KEY", "2DP", "Depth to the top of stratum", "m", "1.50"],
        ],
    }
]


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_AGS


@pytest.fixture
def sample_lines() -> list[str]:
    return SAMPLE_AGS.splitlines()


@pytest.fixture
def parsed(sample_lines: list[str]) -> ParsedDocument:
    return AgsParser().parse(sample_lines)


@pytest.fixture
def buffer(sample_text: str) -> InMemoryBuffer:
    return InMemoryBuffer(sample_text, buffer_id="file:///site/sample.ags")


@pytest.fixture
def dictionary_dir(tmp_path: Path) -> Path:
    """Directory holding a small v4.1.1 dictionary file."""
    path = tmp_path / "data"
    path.mkdir()
    (path / "ags-dictionary-v4.1.1.min.json").write_text(json.dumps(SAMPLE_DICTIONARY))
    return path
