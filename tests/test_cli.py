import json

import pytest

from chain_guardian.cli import EXIT_ERROR, EXIT_INCOMPATIBLE, EXIT_OK, build_parser, main

EVM = "0x742d35Cc6634C0532925a3b8D4C9C0B4b8E6d8A2"
SOLANA = "7xKXtg2CW87d97TXJSDpbD5jBkheTqA83TZRuJosgAsU"
BITCOIN = "1A1zP1eP5QGefi2DMPTfTL5SLmv7Divf"


def test_check_incompatible(capsys):
    assert main(["check", SOLANA, "--chain-id", "eip155:1"]) == EXIT_INCOMPATIBLE
    out = capsys.readouterr().out
    assert "Wrong Chain Detected!" in out
    assert "You are on: Ethereum Mainnet" in out


def test_check_compatible_json(capsys):
    assert main(["check", EVM, "--chain-id", "eip155:137", "--json"]) == EXIT_OK
    data = json.loads(capsys.readouterr().out)
    assert data == {"kind": "compatible", "chain_name": "Polygon", "address": EVM}


def test_check_empty_address(capsys):
    assert main(["check", "", "--chain-id", "eip155:1"]) == EXIT_OK
    assert "No destination address" in capsys.readouterr().out


def test_classify(capsys):
    assert main(["classify", BITCOIN]) == EXIT_OK
    assert capsys.readouterr().out.strip() == "Bitcoin (non-EVM)"

    main(["classify", "hello"])
    assert capsys.readouterr().out.strip() == "Unrecognized"


def test_classify_json(capsys):
    main(["classify", EVM, "--json"])
    data = json.loads(capsys.readouterr().out)
    assert data["network"] == "evm"
    assert data["is_evm"] is True

    main(["classify", "hello", "--json"])
    assert json.loads(capsys.readouterr().out) is None


def test_preview(capsys):
    assert main(["preview", SOLANA, "--chain-id", "eip155:1"]) == EXIT_OK
    assert "Wrong Chain Detected! (Preview)" in capsys.readouterr().out

    main(["preview", EVM, "--chain-id", "eip155:1"])
    assert "No warning would be shown" in capsys.readouterr().out


def test_chains(capsys):
    main(["chains"])
    out = capsys.readouterr().out
    assert "0x2105" in out
    assert "Base" in out
    assert len(out.strip().splitlines()) == 11


def test_samples(capsys):
    assert main(["samples", "--chain-id", "eip155:1"]) == EXIT_OK
    out = capsys.readouterr().out
    assert "Address Looks Compatible" in out
    assert out.count("Wrong Chain Detected!") == 3


def test_handler_errors_exit_with_error(monkeypatch, capsys):
    from chain_guardian import cli
    from chain_guardian.exceptions import MethodNotFoundError

    def broken(method, params=None):
        raise MethodNotFoundError(method)

    monkeypatch.setattr(cli, "on_rpc_request", broken)
    assert main(["preview", SOLANA]) == EXIT_ERROR
    assert "Error: Method not found." in capsys.readouterr().err


def test_command_required():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_chain_id_from_environment(monkeypatch, capsys):
    monkeypatch.setenv("CHAIN_GUARDIAN_CHAIN_ID", "eip155:137")
    assert main(["check", SOLANA]) == EXIT_INCOMPATIBLE
    assert "You are on: Polygon" in capsys.readouterr().out


def test_log_level_from_environment(monkeypatch):
    monkeypatch.setenv("CHAIN_GUARDIAN_LOG_LEVEL", "debug")
    assert build_parser().parse_args(["chains"]).log_level == "DEBUG"


def test_log_level_option():
    args = build_parser().parse_args(["--log-level", "info", "chains"])
    assert args.log_level == "INFO"


def test_unknown_log_level_is_usage_error(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--log-level", "LOUD", "chains"])
    assert exc_info.value.code == 2
    assert "--log-level" in capsys.readouterr().err

    monkeypatch.setenv("CHAIN_GUARDIAN_LOG_LEVEL", "LOUD")
    with pytest.raises(SystemExit) as exc_info:
        main(["chains"])
    assert exc_info.value.code == 2


def test_samples_are_not_previews(capsys):
    main(["samples", "--chain-id", "eip155:1"])
    assert "(Preview)" not in capsys.readouterr().out
