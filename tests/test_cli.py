import io
import sys

import pytest

from carassembly.cli import main, run_session
from carassembly.parts import INPUT_DELAY


def session(*lines):
    out = io.StringIO()
    delays = []
    assembly = run_session([line + "\n" for line in lines], out, delays.append)
    return assembly, out.getvalue(), delays


def test_full_assembly_and_run():
    assembly, text, _ = session("1", "1", "1", "1", "1", "exit")
    assert (assembly.car_type, assembly.engine, assembly.brake_system, assembly.steering_system) == (1, 1, 1, 1)
    assert "자동차가 동작됩니다." in text
    assert text.rstrip().endswith("바이바이")


def test_test_action_reports_fail_reason():
    assembly, text, _ = session("1", "3", "2", "1", "2", "exit")
    assert assembly.brake_system == 2
    assert "Test..." in text
    assert "자동차 부품 조합 테스트 결과 : FAIL" in text
    assert "Sedan에는 Continental제동장치 사용 불가" in text


def test_broken_engine_does_not_move():
    _, text, _ = session("2", "4", "1", "1", "1")
    assert "엔진이 고장나있습니다." in text
    assert "자동차가 동작됩니다." not in text


def test_invalid_input_is_reported_and_step_kept():
    assembly, text, delays = session("abc", "9", "2")
    assert "ERROR :: 숫자만 입력 가능" in text
    assert "ERROR :: 차량 타입은 1 ~ 3 범위만 선택 가능" in text
    assert assembly.car_type == 2
    assert delays.count(INPUT_DELAY) == len(delays)
    assert len(delays) == 3


def test_zero_goes_back_a_step():
    _, text, _ = session("1", "0")
    assert text.count("어떤 차량 타입을 선택할까요?") == 2
    assert text.count("어떤 엔진을 탑재할까요?") == 1


def test_zero_at_run_test_restarts():
    _, text, _ = session("1", "1", "1", "1", "0")
    assert text.count("어떤 차량 타입을 선택할까요?") == 2


def test_run_step_repeats_after_action():
    _, text, _ = session("1", "1", "1", "1", "1", "2")
    assert text.count("멋진 차량이 완성되었습니다.") == 3
    assert "자동차 부품 조합 테스트 결과 : PASS" in text


def test_end_of_input_stops_session():
    assembly, text, _ = session("3")
    assert assembly.car_type == 3
    assert text.endswith("INPUT > ")
    assert "바이바이" not in text


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("exit\n"))
    assert main([]) == 0
    assert "바이바이" in capsys.readouterr().out


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit):
        main(["--bogus"])