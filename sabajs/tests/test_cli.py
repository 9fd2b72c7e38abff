"""
Tests for the command-line runner
"""
import saba


def test_help(capsys):
    assert saba.main(['saba', '--help']) == 0
    assert "Usage:" in capsys.readouterr().out


def test_too_many_arguments(capsys):
    assert saba.main(['saba', 'a.js', 'b.js']) == 1
    assert "Usage:" in capsys.readouterr().out


def test_run_file(tmp_path, capsys, monkeypatch):
    monkeypatch.delenv('SABAJS_DEBUG', raising=False)
    script = tmp_path / "hello.js"
    script.write_text(
        "function greet(name) { return 'hello ' + name; }\n"
        "console.log(greet('saba'));\n",
        encoding="utf-8",
    )
    assert saba.main(['saba', str(script)]) == 0
    assert capsys.readouterr().out.strip() == "hello saba"


def test_run_failing_file(tmp_path, monkeypatch):
    monkeypatch.delenv('SABAJS_DEBUG', raising=False)
    script = tmp_path / "broken.js"
    script.write_text("console.log(1); nope;\n", encoding="utf-8")
    assert saba.main(['saba', str(script)]) == 1


def test_debug_prints_tokens_and_ast(tmp_path, capsys, monkeypatch):
    monkeypatch.setenv('SABAJS_DEBUG', '1')
    script = tmp_path / "debug.js"
    script.write_text("var x = 1;\n", encoding="utf-8")
    assert saba.main(['saba', str(script)]) == 0
    out = capsys.readouterr().out
    assert "Tokens:" in out
    assert "VariableDeclaration" in out


def test_repl_runs_lines_and_buffers_incomplete_input(capsys, monkeypatch):
    monkeypatch.delenv('SABAJS_DEBUG', raising=False)
    lines = iter([
        "function add(a, b) {",
        "  return a + b;",
        "}",
        "console.log(add(2, 3));",
        "exit",
    ])
    monkeypatch.setattr('builtins.input', lambda _prompt: next(lines))
    assert saba.main(['saba']) == 0
    assert "5" in capsys.readouterr().out.splitlines()
