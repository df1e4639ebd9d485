import json

import pytest

from bucketdraw.draw import DrawOrchestrator, GroupAssigner
from bucketdraw.exceptions import (
    ConfigurationException,
    DrawSinkException,
    EntrantCountException,
    EntrantSourceException,
)
from bucketdraw.files import (
    parse_entrants,
    read_entrants,
    render,
    render_text,
    write_report,
)

from conftest import IdentityRandom, make_entrants


@pytest.fixture
def identity_draw(entrants):
    return DrawOrchestrator(GroupAssigner(IdentityRandom())).run(entrants)


def test_parse_entrants_skips_blank_lines():
    lines = ["Real Madrid\n", "\n", "  Inter  \n", "   \n", "Celtic"]
    assert parse_entrants(lines) == ["Real Madrid", "Inter", "Celtic"]


def test_read_entrants_in_file_order(tmp_path, entrants):
    path = tmp_path / "teams.txt"
    path.write_text("\n\n".join(entrants) + "\n\n", encoding="utf-8")
    assert read_entrants(path) == entrants


def test_read_entrants_wrong_count(tmp_path):
    path = tmp_path / "teams.txt"
    path.write_text("\n".join(make_entrants(35)) + "\n", encoding="utf-8")

    with pytest.raises(EntrantCountException) as exc_info:
        read_entrants(path)
    assert exc_info.value.observed == 35


def test_read_entrants_missing_file(tmp_path):
    with pytest.raises(EntrantSourceException) as exc_info:
        read_entrants(tmp_path / "missing.txt")
    assert isinstance(exc_info.value.__cause__, OSError)


def test_render_text_layout(identity_draw):
    lines = render_text(identity_draw).splitlines()

    assert lines[0] == "Bucket A:"
    assert lines[1:10] == make_entrants()[0:9]
    assert lines[10] == ""
    assert lines[11] == "Bucket B:"
    assert lines[33] == "Bucket D:"
    assert lines[43] == ""
    assert lines[44] == "Matches:"
    assert lines[45:48] == ["T1 - T2", "T3 - T1", "T2 - T3"]
    assert lines[-1] == "T28 - T27"
    assert len(lines) == 45 + 144


def test_render_json(identity_draw):
    data = json.loads(render(identity_draw, "json"))
    assert data["groups"]["A"] == make_entrants()[0:9]
    assert data["matches"][0] == ["T1", "T2"]


def test_render_unknown_format(identity_draw):
    with pytest.raises(ConfigurationException):
        render(identity_draw, "xml")


def test_write_report(tmp_path, identity_draw):
    path = write_report(identity_draw, tmp_path / "results.txt")
    content = path.read_text(encoding="utf-8")
    assert content == render_text(identity_draw)
    assert content.endswith("T28 - T27\n")


def test_write_report_unwritable(tmp_path, identity_draw):
    with pytest.raises(DrawSinkException) as exc_info:
        write_report(identity_draw, tmp_path / "missing" / "results.txt")
    assert isinstance(exc_info.value.__cause__, OSError)
