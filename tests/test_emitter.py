import io

import pytest
from rich.console import Console

from modelgen.codegen.core.emitter import ConsoleEmitter, FileEmitter
from modelgen.codegen.core.errors import EmissionError
from modelgen.codegen.core.schema import BaseTypeRef, ColumnDescriptor, GeneratedUnit
from modelgen.codegen.core.synthesizer import synthesize
from modelgen.codegen.core.types import SqlType
from modelgen.codegen.languages.java import JavaGenerator

UNIT = GeneratedUnit(
    simple_name="ModelUser",
    namespace="com.acme",
    base_type=BaseTypeRef("org.javalite.activejdbc.Model"),
    source_entity="com.acme.User",
    table_name="users",
)


class TestFileEmitter:
    def test_path_follows_namespace(self, tmp_path):
        emitter = FileEmitter(tmp_path, ".java")
        assert emitter.path_for(UNIT) == tmp_path / "com" / "acme" / "ModelUser.java"

    def test_unit_without_namespace(self, tmp_path):
        unit = GeneratedUnit("ModelUser", "", UNIT.base_type)
        assert FileEmitter(tmp_path, ".py").path_for(unit) == tmp_path / "ModelUser.py"

    def test_emit_writes_file(self, tmp_path):
        path = FileEmitter(tmp_path / "out", ".java").emit(UNIT, "class X {}\n")

        assert path.read_text(encoding="utf-8") == "class X {}\n"

    def test_emit_overwrites(self, tmp_path):
        emitter = FileEmitter(tmp_path, ".java")
        emitter.emit(UNIT, "old\n")
        path = emitter.emit(UNIT, "new\n")

        assert path.read_text(encoding="utf-8") == "new\n"

    def test_write_failure_raises_emission_error(self, tmp_path):
        blocker = tmp_path / "out"
        blocker.write_text("not a directory", encoding="utf-8")

        with pytest.raises(EmissionError) as exc_info:
            FileEmitter(blocker, ".java").emit(UNIT, "class X {}\n")

        assert exc_info.value.entity == "com.acme.User"
        assert exc_info.value.table == "users"


class TestConsoleEmitter:
    def test_redirected_output_is_written_verbatim(self):
        buffer = io.StringIO()
        emitter = ConsoleEmitter("java", console=Console(file=buffer, width=120))
        code = "public abstract class ModelUser {}\n"

        assert emitter.emit(UNIT, code) is None
        assert buffer.getvalue() == code

    def test_long_lines_survive_narrow_console(self):
        column = ColumnDescriptor(
            "last_successful_synchronisation_timestamp_with_zone", SqlType.TIMESTAMP, 1
        )
        unit = synthesize("User", "com.acme", UNIT.base_type, [column], table_name="users")
        generator = JavaGenerator()
        code = generator.format_code(generator.generate(unit))
        buffer = io.StringIO()

        ConsoleEmitter("java", console=Console(file=buffer, width=80)).emit(unit, code)

        output = buffer.getvalue()
        assert output == code
        assert (
            "public void setLastSuccessfulSynchronisationTimestampWithZone("
            "Timestamp LastSuccessfulSynchronisationTimestampWithZone) {"
        ) in output
        assert all(line == line.rstrip() for line in output.splitlines())

    def test_terminal_output_is_highlighted_with_header(self):
        buffer = io.StringIO()
        console = Console(file=buffer, width=80, force_terminal=True, color_system=None)
        code = (
            "  public void setLastSuccessfulSynchronisationTimestampWithZone("
            "Timestamp LastSuccessfulSynchronisationTimestampWithZone) {\n"
        )

        ConsoleEmitter("java", console=console).emit(UNIT, code)

        output = buffer.getvalue()
        assert "com.acme.ModelUser" in output
        assert "setLastSuccessfulSynchronisationTimestampWithZone(Timestamp" in output
        assert "LastSuccessfulSynchronisationTimestampWithZone)" in output
