"""Tests for the staging list metadata header."""

import pytest

from common.constants import UNSET_INDEX
from staging.header import format_header, is_header, parse_header
from staging.models import StagingMetadata


class TestParseHeader:
    """Tests for parse_header."""

    def test_translate_from_header(self):
        metadata = parse_header("# Translate from: 12")
        assert metadata.translate_from_index == 12
        assert metadata.last_extracted_index == UNSET_INDEX

    def test_last_processed_header(self):
        metadata = parse_header("# Last processed: 41")
        assert metadata.last_extracted_index == 41
        assert metadata.translate_from_index == UNSET_INDEX

    def test_combined_header(self):
        metadata = parse_header("# Last processed: 41 | Translate from: 12")
        assert metadata == StagingMetadata(last_extracted_index=41, translate_from_index=12)

    def test_field_order_does_not_matter(self):
        metadata = parse_header("# Translate from: 3 | Last processed: 7")
        assert metadata == StagingMetadata(last_extracted_index=7, translate_from_index=3)

    @pytest.mark.parametrize("line", [None, "", "bonjour le monde", "#Translate from: 3"])
    def test_missing_marker_yields_defaults(self, line):
        """Test that anything without the marker means nothing processed yet."""
        assert parse_header(line) == StagingMetadata()

    def test_unparsable_field_yields_default(self):
        """Test that a garbled value falls back without raising."""
        metadata = parse_header("# Last processed: abc | Translate from: 4")
        assert metadata.last_extracted_index == UNSET_INDEX
        assert metadata.translate_from_index == 4

    def test_negative_value_yields_default(self):
        assert parse_header("# Translate from: -5").translate_from_index == UNSET_INDEX


class TestIsHeader:
    """Tests for is_header."""

    def test_recognizes_known_labels(self):
        assert is_header("# Translate from: 0")
        assert is_header("# Last processed: 0")

    def test_plain_comment_is_not_a_header(self):
        """Test that an entry starting with '# ' is kept as an entry."""
        assert not is_header("# chapitre un")


class TestFormatHeader:
    """Tests for format_header."""

    def test_nothing_established(self):
        assert format_header(StagingMetadata()) is None

    def test_translate_only(self):
        """Test the translation-only format is kept when extraction never ran."""
        header = format_header(StagingMetadata(translate_from_index=2))
        assert header == "# Translate from: 2"

    def test_extract_only(self):
        header = format_header(StagingMetadata(last_extracted_index=5))
        assert header == "# Last processed: 5"

    def test_both_fields(self):
        header = format_header(StagingMetadata(last_extracted_index=5, translate_from_index=2))
        assert header == "# Last processed: 5 | Translate from: 2"

    def test_parse_reads_back_formatted_header(self):
        metadata = StagingMetadata(last_extracted_index=9, translate_from_index=0)
        assert parse_header(format_header(metadata)) == metadata
