"""
Unit tests for profile and language option models.
"""

import xml.etree.ElementTree as ET
from datetime import date

import pytest

from copyright_library.errors import InvalidDataError
from copyright_library.models import CopyrightProfile
from copyright_library.models import FileTypeOverride
from copyright_library.models import LanguageOptions
from copyright_library.models import Options


@pytest.mark.unit
class TestCopyrightProfile:
    """Test profile serialization and rendering."""

    def test_element_round_trip(self) -> None:
        profile = CopyrightProfile(name="MIT", notice="Line one\nLine two", allow_replace_regexp="Old.*")

        restored = CopyrightProfile.from_element(profile.to_element())

        assert restored == profile

    def test_none_fields_not_written(self) -> None:
        element = CopyrightProfile(name="MIT").to_element()

        names = [option.get("name") for option in element.findall("option")]
        assert "allow_replace_regexp" not in names

    def test_unknown_options_ignored(self) -> None:
        element = ET.fromstring(
            '<copyright><option name="name" value="MIT"/><option name="myName" value="legacy"/></copyright>'
        )

        assert CopyrightProfile.from_element(element).name == "MIT"

    def test_missing_element_gives_defaults(self) -> None:
        profile = CopyrightProfile.from_element(None)

        assert profile.name == ""
        assert profile.keyword == "Copyright"

    def test_copy_from_keeps_name(self) -> None:
        target = CopyrightProfile(name="Target", notice="old")

        target.copy_from(CopyrightProfile(name="Source", notice="new", keyword="(c)"))

        assert target.name == "Target"
        assert target.notice == "new"
        assert target.keyword == "(c)"

    def test_render_notice_substitutes_variables(self) -> None:
        profile = CopyrightProfile(
            name="MIT",
            notice="Copyright $today.year-$today.month $project.name ($unknown.thing) $$5",
        )

        text = profile.render_notice({"project.name": "demo"}, today=date(2024, 3, 9))

        assert text == "Copyright 2024-03 demo ($unknown.thing) $5"


@pytest.mark.unit
class TestOptions:
    """Test per-file-type options."""

    def test_missing_file_type_uses_template(self) -> None:
        options = Options()

        assert options.get_options("Python").file_type_override == FileTypeOverride.USE_TEMPLATE

    def test_merged_options_follow_template(self) -> None:
        options = Options()
        options.set_template_options(LanguageOptions(block=False, length_before=40))

        merged = options.get_merged_options("Java")

        assert merged.block is False
        assert merged.length_before == 40

    def test_custom_options_win(self) -> None:
        options = Options()
        options.set_template_options(LanguageOptions(block=False))
        options.set_options("Java", LanguageOptions(file_type_override=FileTypeOverride.USE_CUSTOM, block=True))

        assert options.get_merged_options("Java").block is True

    def test_external_round_trip(self) -> None:
        options = Options()
        options.set_template_options(LanguageOptions(separator_before=True, filler="="))
        options.set_options("Python", LanguageOptions(file_type_override=FileTypeOverride.NO_COPYRIGHT))
        element = ET.Element("settings")

        options.write_external(element)
        restored = Options()
        restored.read_external(element)

        assert restored.file_types() == ["Python"]
        assert restored.template_options.filler == "="
        assert restored.template_options.separator_before is True
        assert restored.get_options("Python").file_type_override == FileTypeOverride.NO_COPYRIGHT

    def test_read_external_rejects_unnamed_entry(self) -> None:
        element = ET.fromstring("<settings><language/></settings>")

        with pytest.raises(InvalidDataError):
            Options().read_external(element)

    def test_read_external_rejects_invalid_value(self) -> None:
        element = ET.fromstring(
            '<settings><language name="Java"><option name="length_before" value="many"/></language></settings>'
        )

        with pytest.raises(InvalidDataError, match="LanguageOptions"):
            Options().read_external(element)
