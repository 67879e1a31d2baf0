"""
Tests for the console output capability and composition root
"""

import io

from hellodi import ConsoleDependency, Dependency, Library, create_library, run


class TestConsoleDependency:
    """Console writing"""

    def test_is_a_dependency(self):
        assert isinstance(ConsoleDependency(), Dependency)

    def test_greeting_goes_to_stdout(self, capsys):
        Library(ConsoleDependency()).say_hello()

        captured = capsys.readouterr()
        assert captured.out == "Hello World\n"
        assert captured.err == ""

    def test_explicit_stream(self):
        stream = io.StringIO()

        ConsoleDependency(stream).output("Hello World")

        assert stream.getvalue() == "Hello World\n"

    def test_empty_message(self):
        stream = io.StringIO()

        ConsoleDependency(stream).output("")

        assert stream.getvalue() == "\n"

    def test_escape_sequences_written_unchanged(self):
        """Messages reach a non-tty stream exactly as given"""
        stream = io.StringIO()

        ConsoleDependency(stream).output("\x1b[31mred\x1b[0m")

        assert stream.getvalue() == "\x1b[31mred\x1b[0m\n"


class TestCompositionRoot:
    """create_library() and run()"""

    def test_defaults_to_console(self):
        library = create_library()

        assert isinstance(library.dependency, ConsoleDependency)

    def test_uses_supplied_dependency(self, fake_dependency):
        library = create_library(fake_dependency)
        library.say_hello()

        assert library.dependency is fake_dependency
        assert fake_dependency.message == "Hello World"

    def test_run_prints_greeting(self, capsys):
        run()

        assert capsys.readouterr().out == "Hello World\n"
