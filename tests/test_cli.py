"""
Command line driver tests.
"""

import logging

import pytest
from minicc.cli import main
from minicc.config import CompilerOptions, configure_logging, LOGGER_NAME
from minicc.errors import ConfigError


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def source(tmp_path):
    path = tmp_path / "prog.c"
    path.write_text("int main() { return 42; }\n", encoding="utf-8")
    return path


class TestDriver:
    """End-to-end driver tests."""
    
    def test_compile(self, source, tmp_path, capsys):
        out = tmp_path / "prog.s"
        assert main([str(source), str(out)]) == 0
        assert out.read_text() == ".global main\nmain:\n    movl $42, %eax\n    ret\n"
        assert capsys.readouterr().out == "Compilation successful\n"
    
    def test_intel(self, source, tmp_path):
        out = tmp_path / "prog.s"
        assert main([str(source), str(out), "--syntax", "intel"]) == 0
        assert out.read_text().startswith(".intel_syntax noprefix\n")
    
    def test_missing_input(self, tmp_path, capsys):
        code = main([str(tmp_path / "nope.c"), str(tmp_path / "out.s")])
        assert code == 1
        assert "Could not open input file" in capsys.readouterr().err
        assert not (tmp_path / "out.s").exists()
    
    def test_unwritable_output(self, source, tmp_path, capsys):
        code = main([str(source), str(tmp_path / "missing" / "out.s")])
        assert code == 1
        assert "Could not open output file" in capsys.readouterr().err
    
    def test_malformed_source_still_succeeds(self, tmp_path, capsys):
        src = tmp_path / "bad.c"
        src.write_text("int main() { return 1;", encoding="utf-8")
        out = tmp_path / "bad.s"
        assert main([str(src), str(out)]) == 0
        assert out.read_text() == ".global main\nmain:\n"
    
    def test_strict_failure(self, tmp_path, capsys):
        src = tmp_path / "bad.c"
        src.write_text("int main() { return 1;", encoding="utf-8")
        out = tmp_path / "bad.s"
        assert main([str(src), str(out), "--strict"]) == 1
        err = capsys.readouterr().err
        assert err.startswith("error: ")
        assert "Expected '}'" in err
        assert not out.exists()
    
    def test_dump_ast(self, source, tmp_path, capsys):
        assert main([str(source), str(tmp_path / "o.s"), "--dump-ast"]) == 0
        assert "Function(main)" in capsys.readouterr().out
    
    def test_dump_tokens(self, source, tmp_path, capsys):
        assert main([str(source), str(tmp_path / "o.s"), "--dump-tokens"]) == 0
        out = capsys.readouterr().out
        assert "Token(KEYWORD, 'int', line=1, column=1)" in out
        assert "Token(EOF, line=2, column=1)" in out
    
    def test_wrong_arguments(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["only-one.c"])
        assert exc.value.code == 2


class TestConfig:
    """Options and logging setup tests."""
    
    def test_defaults(self):
        options = CompilerOptions()
        assert options.syntax == "att"
        assert options.strict is False
        assert options.validate() is options
    
    def test_invalid_syntax(self):
        with pytest.raises(ConfigError):
            CompilerOptions(syntax="mips").validate()
    
    @pytest.mark.parametrize("verbosity,level", [
        (0, logging.WARNING),
        (1, logging.DEBUG),
        (2, logging.DEBUG),
        (-1, logging.ERROR),
    ])
    def test_levels(self, verbosity, level):
        logger = configure_logging(verbosity)
        assert logger.name == "minicc"
        assert logger.level == level
    
    def test_handler_added_once(self):
        configure_logging()
        configure_logging()
        assert len(logging.getLogger(LOGGER_NAME).handlers) == 1
