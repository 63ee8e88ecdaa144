"""Tests for dotted-path queries."""

import doctest

import pytest

from hl7slice.parser.message import Message
from hl7slice.query import selector
from hl7slice.query.selector import PathTail, parse_tail, query

ORU_R01_MESSAGE = (
    "MSH|^~\\&|GHH LAB|ELAB-3|GHH OE|BLDG4|200202150930||ORU^R01|CNTRL-3456|P|2.4\r"
    "PID|||555-44-4444||EVERYWOMAN^EVE^E^^^^L|JONES|19620320|F|||"
    "153 FERNWOOD DR.^^STATESVILLE^OH^35292||(206)3345232|(206)752-121||||AC555444444||"
    "67-A4335^OH^20030520\r"
    "OBR|1|845439^GHH OE|1045813^GHH LAB|15545^GLUCOSE|||200202150730|||||||||"
    "555-55-5555^PRIMARY^PATRICIA P^^^^MD^^|||||||Joes Obs \\T\\ Gynae||F||||||"
    "444-44-4444^HIPPOCRATES^HOWARD H^^^^MD\r"
    "OBX|1|SN|1554-5^GLUCOSE^POST 12H CFST:MCNC:PT:SER/PLAS:QN||^182|mg/dl|70_105|H|||F\r"
)

REPEATING_MESSAGE = (
    "MSH|^~\\&|APP|FAC|||20250101120000||ADT^A08|MSG9|P|2.5\r"
    "PID|||ID1^^^HOSP^MR~ID2&X^^^CLINIC^PI||DOE^JOHN\r"
)


@pytest.fixture
def message() -> Message:
    return Message.parse(ORU_R01_MESSAGE)


class TestParseTail:
    def test_full_tail(self) -> None:
        assert parse_tail("F2.R1.C3.S4") == PathTail(field=2, repeat=1, component=3, subcomponent=4)

    def test_subset_tail(self) -> None:
        assert parse_tail("F2.C3") == PathTail(field=2, component=3)

    def test_field_tail_without_f(self) -> None:
        assert parse_tail("R1.C2", require_field=False) == PathTail(repeat=1, component=2)

    @pytest.mark.parametrize(
        "text",
        ["", "F", "C3", "F0", "Fx", "X1", "f2", "F2.F3", "F2.C1.R1", "F2.", "F-1", "F1.R1.C1.S1.S1"],
    )
    def test_malformed_tails(self, text: str) -> None:
        assert parse_tail(text) is None

    def test_field_element_rejected_for_field_tail(self) -> None:
        assert parse_tail("F1", require_field=False) is None


class TestHeaderQueries:
    def test_header_fields(self, message: Message) -> None:
        assert query(message, "MSH.F3") == "GHH LAB"
        assert query(message, "MSH.F7") == "200202150930"
        assert query(message, "MSH.F8") == ""
        assert query(message, "MSH.F9") == "ORU^R01"
        assert query(message, "MSH.F9.C2") == "R01"
        assert query(message, "MSH.F12") == "2.4"

    def test_field_separator_is_msh_1(self, message: Message) -> None:
        assert query(message, "MSH.F1") == "|"

    def test_encoding_characters_are_msh_2(self, message: Message) -> None:
        assert query(message, "MSH.F2") == "^~\\&"

    def test_msh_1_and_2_are_atomic(self, message: Message) -> None:
        assert query(message, "MSH.F1.R1") == "|"
        assert query(message, "MSH.F2.R1.C1") == "^~\\&"
        assert query(message, "MSH.F2.C2") == ""
        assert query(message, "MSH.F1.R2") == ""

    def test_segment_only_returns_source(self, message: Message) -> None:
        assert query(message, "MSH") == message.segments[0].source


class TestBodyQueries:
    def test_pid_fields(self, message: Message) -> None:
        assert query(message, "PID.F3") == "555-44-4444"
        assert query(message, "PID.F5.C1") == "EVERYWOMAN"
        assert query(message, "PID.F11.C5") == "35292"
        assert query(message, "PID.F11.C2") == ""

    def test_obr_escaped_value_is_literal(self, message: Message) -> None:
        assert query(message, "OBR.F23") == "Joes Obs \\T\\ Gynae"

    def test_obx_component(self, message: Message) -> None:
        assert query(message, "OBX.F5.C2") == "182"
        assert query(message, "OBX.F3.R1.C3") == "POST 12H CFST:MCNC:PT:SER/PLAS:QN"

    def test_default_repeat_and_component(self, message: Message) -> None:
        pid = message.get_segment("PID")
        assert pid is not None
        for number in range(1, len(pid)):
            path = f"PID.F{number}"
            if "~" not in query(message, path):
                assert query(message, path) == query(message, f"{path}.R1")
            if "^" not in query(message, path):
                assert query(message, f"{path}.R1") == query(message, f"{path}.R1.C1")

    def test_repeats(self) -> None:
        msg = Message.parse(REPEATING_MESSAGE)
        assert query(msg, "PID.F3.R1") == "ID1^^^HOSP^MR"
        assert query(msg, "PID.F3.R2") == "ID2&X^^^CLINIC^PI"
        assert query(msg, "PID.F3.R2.C4") == "CLINIC"
        assert query(msg, "PID.F3.R2.C1.S2") == "X"
        assert query(msg, "PID.F3.R2.S1") == "ID2"
        assert query(msg, "PID.F3.R3") == ""
        assert query(msg, "PID.F3.C4") == "HOSP"

    def test_first_matching_segment_wins(self) -> None:
        msg = Message.parse("MSH|^~\\&|A\rOBX|1|first\rOBX|2|second")
        assert query(msg, "OBX.F2") == "first"


class TestTotality:
    def test_missing_segment(self, message: Message) -> None:
        assert query(message, "NOPE.F1") == ""
        assert query(message, "NOPE") == ""

    def test_field_out_of_range(self, message: Message) -> None:
        assert query(message, "PID.F99") == ""
        assert query(message, "PID.F99999999999999999999") == ""

    @pytest.mark.parametrize(
        "path",
        ["", ".", "MSH.", "MSH..F1", "PID.F3.R1.C1.S1.S2", "PID.F-1", "PID.X3", "PID.3", "PI", "PID.F3.Q"],
    )
    def test_malformed_paths_are_empty(self, message: Message, path: str) -> None:
        assert query(message, path) == ""


class TestModuleExample:
    def test_docstring_example_runs(self) -> None:
        results = doctest.testmod(selector)
        assert results.attempted >= 3
        assert results.failed == 0
