"""Tests for the chain CLI."""

import json

import pytest

from src.chainkit.service import ChainService
from src.clients.cli.chain_cli import build_parser, main
from tests.fakes import FakeLLM, FakeLLMFactory


def _service(settings, *llms):
    return ChainService(settings, FakeLLMFactory(*llms))


def test_complete_from_json(settings, capsys):
    code = main(["complete", "--payload-json", '{"prompt": "Say hi"}'], service=_service(settings, FakeLLM(["hi"])))
    assert code == 0
    assert capsys.readouterr().out.strip() == "hi"


def test_chain_from_file(settings, tmp_path, capsys):
    payload = tmp_path / "payload.json"
    payload.write_text(json.dumps({"prompt": "{a}?", "properties": [{"key": "a", "value": "why"}]}))
    llm = FakeLLM(["because"])
    code = main(["chain", "llm", "--payload-file", str(payload)], service=_service(settings, llm))
    assert code == 0
    assert capsys.readouterr().out.strip() == "because"
    assert llm.prompts == ["why?"]


def test_chains_writes_output_file(settings, tmp_path):
    out = tmp_path / "out.txt"
    payload = {
        "prompt": "Say {x}",
        "chains": [{"chainType": "llm", "prompt": "word", "outputVariable": "x"}],
    }
    service = _service(settings, FakeLLM(["hello"]), FakeLLM(["hello!"]))
    code = main(["chains", "-j", json.dumps(payload), "-o", str(out)], service=service)
    assert code == 0
    assert out.read_text() == "hello!"


def test_unsupported_chain_type_prints_error(settings, capsys):
    code = main(["chain", "graph", "-j", '{"prompt": "x"}'], service=_service(settings, FakeLLM()))
    assert code == 1
    assert "Error:" in capsys.readouterr().err


def test_invalid_json_prints_error(settings, capsys):
    code = main(["complete", "-j", "{not json"], service=_service(settings, FakeLLM()))
    assert code == 1
    assert "Error:" in capsys.readouterr().err


def test_no_command_prints_help(capsys):
    assert main([]) == 1


def test_payload_source_is_required():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["complete"])
