"""Engine tests: precedence resolution, immediate operators and equals."""

import math

import pytest

from core import CalculatorEngine, get_operator
from display import RecordingDisplay, HtmlStackDisplay
from session import CalculatorSession


def run(keys):
    session = CalculatorSession()
    session.press(keys)
    return session


# --- Precedence (4 tests) ---

def test_mul_resolves_before_pending_add():
    assert run("2 + 3 * 4 =").display_text == "14"


def test_lower_precedence_folds_pending_mul():
    assert run("2 * 3 + 4 =").display_text == "10"


def test_equal_precedence_is_left_associative():
    assert run("1 - 2 - 3 =").value == pytest.approx(-4.0)
    assert run("8 / 2 / 2 =").value == pytest.approx(2.0)


def test_fold_shows_running_total():
    session = run("2 + 3 * 4 -")
    assert session.display_text == "14"
    assert session.pending == "14 -"
    session.press("5 =")
    assert session.display_text == "9"


def test_higher_precedence_defers_on_stack():
    session = run("2 + 3 *")
    assert session.pending == "2 + 3 *"
    assert session.display_text == "3"


# --- Operator substitution and equals (6 tests) ---

def test_operator_substitution():
    assert run("5 + * 3 =").display_text == "15"


def test_chained_equals():
    session = run("2 + 3 =")
    assert session.display_text == "5"
    session.press("+ 3 =")
    assert session.display_text == "8"


def test_equals_with_empty_stack_is_noop():
    session = run("7 =")
    assert session.display_text == "7"
    assert session.pending == ""


def test_equals_after_dangling_operator():
    assert run("5 + =").display_text == "5"
    assert run("2 + 3 * =").display_text == "5"


def test_equals_empties_stack_and_restarts():
    session = run("2 + 3 =")
    assert len(session.engine.stack) == 0
    assert not session.engine.register.changed()
    session.press("4")
    assert session.display_text == "4"


def test_floating_point_result_text():
    assert run("0.1 + 0.2 =").display_text == "0.30000000000000004"


# --- Immediate operators (7 tests) ---

def test_sqrt_applies_to_register():
    assert run("9 sqrt").display_text == "3"


def test_immediate_on_typed_operand_keeps_pending_op():
    session = run("2 + 9 sqrt")
    assert session.pending == "2 +"
    session.press("=")
    assert session.display_text == "5"


def test_immediate_on_stale_value_retracts_pending_op():
    session = run("2 + sqrt")
    assert session.value == pytest.approx(math.sqrt(2))
    assert session.pending == ""


def test_double_negation_restores_value():
    session = run("5 neg")
    assert session.display_text == "-5"
    session.press("neg")
    assert session.display_text == "5"


def test_negation_of_computed_result_is_noop():
    session = run("2 + 3 = neg")
    assert session.display_text == "5"


def test_negation_of_unchanged_register_keeps_pending_op():
    session = run("2 + neg")
    assert session.display_text == "2"
    assert session.pending == "2 +"


def test_other_immediate_on_unchanged_register_retracts_pending_op():
    session = run("2 + sqrt")
    assert session.pending == ""
    session = run("2 + q")
    assert session.display_text == "4"
    assert session.pending == ""


def test_digits_after_negation_append():
    assert run("5 neg 3").display_text == "-53"


def test_reciprocal_and_square():
    assert run("4 r").display_text == "0.25"
    assert run("3 q").display_text == "9"


# --- Non-finite results (3 tests) ---

def test_division_by_zero_is_displayed():
    session = run("5 / 0 =")
    assert math.isinf(session.value)
    assert session.display_text == "Infinity"


def test_zero_over_zero_is_nan():
    session = run("0 / 0 =")
    assert math.isnan(session.value)
    assert session.display_text == "NaN"


def test_sqrt_of_negative_is_nan():
    assert run("4 neg sqrt").display_text == "NaN"


# --- Resets (4 tests) ---

def test_clear_all_returns_to_initial_state():
    session = run("2 + 3 * 4 C")
    assert session.display_text == "0"
    assert session.pending == ""
    assert session.engine.register.fresh


def test_clear_entry_keeps_pending_stack():
    assert run("2 + 3 CE 4 =").display_text == "6"


def test_backspace_boundaries():
    assert run("123 BSP").display_text == "12"
    session = run("1 BSP")
    assert session.display_text == "0"
    assert session.engine.register.fresh
    assert run("2 + BSP").display_text == "2"


def test_second_decimal_point_ignored():
    session = run("1.5.2")
    assert session.display_text == "1.52"
    assert session.value == pytest.approx(1.52)


# --- Render notifications (3 tests) ---

def test_every_operation_renders_a_snapshot():
    recorder = RecordingDisplay()
    engine = CalculatorEngine([recorder])
    engine.push_digit("2")
    engine.operate(get_operator("add"))
    engine.push_digit("3")
    assert len(recorder.snapshots) == 3
    assert recorder.last.text == "3"
    assert recorder.last.pending == "2 +"


def test_clear_blanks_displays_then_renders():
    recorder = RecordingDisplay()
    session = CalculatorSession(displays=[recorder])
    session.press("2 + 3 C")
    assert recorder.clear_count == 1
    assert recorder.last.text == "0"
    assert recorder.last.entries == ()


def test_snapshot_is_not_affected_by_later_keys():
    recorder = RecordingDisplay()
    session = CalculatorSession(displays=[recorder])
    session.press("2 +")
    snapshot = recorder.last
    session.press("3 * 4")
    assert snapshot.pending == "2 +"
    with pytest.raises(AttributeError):
        snapshot.text = "9"


def test_html_stack_display_markup():
    html = HtmlStackDisplay()
    session = CalculatorSession(displays=[html])
    session.press("2 + 3 /")
    assert html.html == "<span>2</span><span>+</span><span>3</span><span>&#xF7;</span>"
    session.press("C")
    assert html.html == ""
