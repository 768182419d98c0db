"""Tests for the CLI command processor."""

from __future__ import annotations

import pytest
from pytest_mock import MockerFixture

from hierns.ui.cli import CommandProcessor, main
from hierns.ui.cli.args.options import DecodeArgs, ParseArgs


def test_process_command_runs_parse(mocker: MockerFixture) -> None:
    args = ParseArgs(command="parse", text="a", literal=False, verbose=False, quiet=False)
    _ = mocker.patch("hierns.ui.cli.cli.ArgumentParser.process_args", return_value=args)
    parse_command = mocker.patch("hierns.ui.cli.cli.ParseCommand")
    parse_command.return_value.execute.return_value = 0

    CommandProcessor.process_command(["parse", "a"])

    parse_command.assert_called_once_with(args)


def test_process_command_exits_with_decode_failure(mocker: MockerFixture) -> None:
    args = DecodeArgs(command="decode", source="5", input_file=None, verbose=False, quiet=False)
    _ = mocker.patch("hierns.ui.cli.cli.ArgumentParser.process_args", return_value=args)
    decode_command = mocker.patch("hierns.ui.cli.cli.DecodeCommand")
    decode_command.return_value.execute.return_value = 1

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["decode", "5"])
    assert excinfo.value.code == 1


def test_process_command_handles_keyboard_interrupt(mocker: MockerFixture) -> None:
    _ = mocker.patch(
        "hierns.ui.cli.cli.ArgumentParser.process_args", side_effect=KeyboardInterrupt
    )

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command([])
    assert excinfo.value.code == 130


def test_process_command_handles_unexpected_errors(mocker: MockerFixture) -> None:
    _ = mocker.patch(
        "hierns.ui.cli.cli.ArgumentParser.process_args", side_effect=RuntimeError("boom")
    )
    mock_logger = mocker.patch("hierns.ui.cli.cli.logger")

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command([])
    assert excinfo.value.code == 1
    assert mock_logger.error.call_args.args[1] == "boom"


def test_main_returns_zero_on_success(mocker: MockerFixture) -> None:
    process = mocker.patch("hierns.ui.cli.cli.CommandProcessor.process_command")

    assert main() == 0
    process.assert_called_once_with()
