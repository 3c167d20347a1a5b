# tests/conftest.py
"""
Shared fixtures.

`mini_wordnet` writes a small but complete dictionary directory (all eight
index/data files) into tmp_path. Data-file templates refer to records by
key, e.g. "{car}"; every key is rendered as the 8-digit byte offset of its
line, so offsets stored in lines match their real positions.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Tuple

import pytest

from lexdb.services.dictionary import Dictionary

LICENSE_HEADER = (
    "  1 This software and database is being provided to you, the LICENSEE, by  \n"
    "  2 Princeton University under the following license.  By obtaining, using  \n"
)

DATA_RECORDS: Dict[str, List[Tuple[str, str]]] = {
    "noun": [
        (
            "car",
            "{car} 06 n 04 car 0 auto 0 automobile 0 motor_car 0 003 "
            "@ {vehicle} n 0000 ~ {cab} n 0000 + {drive} v 0101 "
            "| a motor vehicle with four wheels; usually propelled by an internal "
            'combustion engine; "he needs a car to get to work"  ',
        ),
        (
            "railcar",
            "{railcar} 06 n 02 car 1 railcar 0 001 @ {vehicle} n 0000 "
            '| a wheeled vehicle adapted to the rails of railroad; "three cars had jumped the rails"  ',
        ),
        (
            "vehicle",
            "{vehicle} 06 n 01 vehicle 0 002 ~ {car} n 0000 ~ {railcar} n 0000 "
            "| a conveyance that transports people or objects  ",
        ),
        (
            "cab",
            "{cab} 06 n 02 cab 0 taxi 0 001 @ {car} n 0000 "
            "| a car driven by a person whose job is to take passengers where they want to go  ",
        ),
        ("cardinal", "{cardinal} 05 n 01 cardinal 0 000 | crested thick-billed North American finch  "),
        ("carrot", "{carrot} 13 n 01 carrot 0 000 | deep orange edible root of the cultivated carrot plant  "),
    ],
    "verb": [
        (
            "drive",
            "{drive} 38 v 02 drive 0 motor 0 002 @ {travel} v 0000 + {car} n 0101 "
            '02 + 02 00 + 22 01 | travel or be transported in a vehicle; "We drove to the university"  ',
        ),
        ("travel", "{travel} 38 v 01 travel 0 001 ~ {drive} v 0000 01 + 01 00 | change location; move, travel, or proceed  "),
    ],
    "adj": [
        (
            "big",
            "{big} 00 a 01 big 0 002 ! {small} a 0101 & {huge} s 0000 "
            "| above average in size or number or quantity  ",
        ),
        ("galore", "{galore} 00 a 01 galore(ip) 0 000 | in great numbers  "),
        ("huge", "{huge} 00 s 01 huge 0 001 & {big} a 0000 | unusually great in size or amount or degree  "),
        ("small", "{small} 00 a 01 small 0 001 ! {big} a 0101 | limited or below average in number or quantity  "),
    ],
    "adv": [
        ("quickly", '{quickly} 02 r 01 quickly 0 001 ! {slowly} r 0101 | with rapid movement; "he walked quickly"  '),
        ("slowly", "{slowly} 02 r 01 slowly 0 001 ! {quickly} r 0101 | without speed  "),
    ],
}

INDEX_LINES: Dict[str, List[str]] = {
    "noun": [
        "auto n 1 1 @ 1 0 {car}  ",
        "automobile n 1 1 @ 1 0 {car}  ",
        "cab n 1 1 @ 1 0 {cab}  ",
        "car n 2 3 @ ~ + 2 1 {car} {railcar}  ",
        "cardinal n 1 0 1 0 {cardinal}  ",
        "carrot n 1 0 1 0 {carrot}  ",
        "motor_car n 1 1 @ 1 0 {car}  ",
        "railcar n 1 1 @ 1 0 {railcar}  ",
        "taxi n 1 1 @ 1 0 {cab}  ",
        "vehicle n 1 1 ~ 1 0 {vehicle}  ",
    ],
    "verb": [
        "drive v 1 2 @ + 1 0 {drive}  ",
        "motor v 1 2 @ + 1 0 {drive}  ",
        "travel v 1 1 ~ 1 0 {travel}  ",
    ],
    "adj": [
        "big a 1 2 ! & 1 0 {big}  ",
        "galore a 1 0 1 0 {galore}  ",
        "huge a 1 1 & 1 0 {huge}  ",
        "small a 1 1 ! 1 0 {small}  ",
    ],
    "adv": [
        "quickly r 1 1 ! 1 0 {quickly}  ",
        "slowly r 1 1 ! 1 0 {slowly}  ",
    ],
}


class _Zeros(dict):
    def __missing__(self, key: str) -> str:
        return "0" * 8


@dataclass
class MiniWordNet:
    root: Path
    offsets: Dict[str, int]

    def line_of(self, key: str) -> str:
        for records in DATA_RECORDS.values():
            for k, template in records:
                if k == key:
                    return render(template, self.offsets)
        raise KeyError(key)


def render(template: str, offsets: Dict[str, int]) -> str:
    return template.format_map({k: f"{v:08d}" for k, v in offsets.items()})


def compute_offsets() -> Dict[str, int]:
    """Offsets only depend on line lengths, which fixed-width keys keep stable."""
    offsets: Dict[str, int] = {}
    for records in DATA_RECORDS.values():
        pos = len(LICENSE_HEADER.encode("ascii"))
        for key, template in records:
            offsets[key] = pos
            pos += len(template.format_map(_Zeros()).encode("ascii")) + 1
    return offsets


def write_mini_wordnet(root: Path) -> MiniWordNet:
    offsets = compute_offsets()
    for stem, records in DATA_RECORDS.items():
        body = "".join(render(t, offsets) + "\n" for _, t in records)
        (root / f"data.{stem}").write_bytes((LICENSE_HEADER + body).encode("ascii"))
    for stem, lines in INDEX_LINES.items():
        body = "".join(render(t, offsets) + "\n" for t in lines)
        (root / f"index.{stem}").write_bytes((LICENSE_HEADER + body).encode("ascii"))
    return MiniWordNet(root=root, offsets=offsets)


@pytest.fixture
def mini_wordnet(tmp_path: Path) -> MiniWordNet:
    root = tmp_path / "dict"
    root.mkdir()
    return write_mini_wordnet(root)


@pytest.fixture
def dictionary(mini_wordnet: MiniWordNet) -> Dictionary:
    return Dictionary(mini_wordnet.root)


class CountingSource:
    """SynsetSource wrapper that counts reads; optionally strict."""

    def __init__(self, inner: Dictionary, strict_loading: bool = False):
        self.inner = inner
        self.strict_loading = strict_loading
        self.fetches = 0
        self.sense_lookups = 0

    def fetch_synset(self, category, offset):
        self.fetches += 1
        return self.inner.fetch_synset(category, offset)

    def sense_number(self, word, category, offset):
        self.sense_lookups += 1
        return self.inner.sense_number(word, category, offset)


@pytest.fixture
def counting_source(dictionary: Dictionary) -> CountingSource:
    return CountingSource(dictionary)


@pytest.fixture
def strict_counting_source(dictionary: Dictionary) -> CountingSource:
    return CountingSource(dictionary, strict_loading=True)
