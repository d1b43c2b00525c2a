"""Tests for metadata and dependency extraction."""
import pytest

from agentforge.core.extraction import metadata as metadata_module
from agentforge.core.extraction.dependencies import extract_dependencies
from agentforge.core.extraction.metadata import (
    extract_metadata,
    parse_frontmatter,
    slugify,
)
from agentforge.core.generation.models import CodeFile, Complexity, GenerationRequest


@pytest.fixture
def request_with_features():
    return GenerationRequest(
        description="Weather Forecasting Skill!!",
        features=["api", "caching"],
        complexity="advanced",
    )


class TestSlugify:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("weather forecasting skill", "weather-forecasting-skill"),
            ("Weather Forecasting Skill!!", "weather-forecasting-skill"),
            ("  Hello   World  ", "hello-world"),
            ("Token swap (Jupiter) v2", "token-swap-jupiter-v2"),
            ("!!!", ""),
        ],
    )
    def test_slugify(self, text, expected):
        assert slugify(text) == expected

    def test_truncates_to_fifty_characters(self):
        assert len(slugify("word " * 30)) == 50


class TestParseFrontmatter:
    def test_reads_fields(self, sample_skill_md):
        fields = parse_frontmatter(sample_skill_md)
        assert fields.name == "weather-pro"
        assert fields.description == "Professional weather forecasting"
        assert fields.version == "2.1.0"

    def test_missing_fields_are_none(self, nameless_skill_md):
        fields = parse_frontmatter(nameless_skill_md)
        assert fields.name is None
        assert fields.description == "Forecasts the weather"

    def test_no_header(self):
        assert parse_frontmatter("# Just a heading\n\nname: nope\n") is None

    def test_empty_header(self):
        fields = parse_frontmatter("---\n---\n# Body")
        assert fields is not None
        assert fields.name is None

    def test_body_fields_ignored(self):
        fields = parse_frontmatter("---\ndescription: d\n---\nname: wrong\n")
        assert fields.name is None

    def test_crlf_line_endings(self):
        text = "---\r\nname: weather-pro\r\nversion: 2.0.0\r\n---\r\n# Weather\r\n"
        fields = parse_frontmatter(text)
        assert fields is not None
        assert fields.name == "weather-pro"
        assert fields.version == "2.0.0"

    def test_leading_blank_lines(self):
        fields = parse_frontmatter("\n  \n---\nname: weather-pro\n---\n")
        assert fields.name == "weather-pro"

    def test_field_labels_case_insensitive(self):
        fields = parse_frontmatter("---\nName: 'quoted-name'\nVERSION: 3.0.0\n---\n")
        assert fields.name == "quoted-name"
        assert fields.version == "3.0.0"

    def test_prefixed_labels_do_not_match(self):
        fields = parse_frontmatter("---\nsubname: other\n---\n")
        assert fields.name is None


class TestExtractMetadata:
    def test_header_values_win(self, sample_skill_md, request_with_features):
        metadata = extract_metadata(sample_skill_md, request_with_features)
        assert metadata.name == "weather-pro"
        assert metadata.description == "Professional weather forecasting"
        assert metadata.version == "2.1.0"
        assert metadata.author == "AgentForge"

    def test_tags_and_summary(self, sample_skill_md, request_with_features):
        metadata = extract_metadata(sample_skill_md, request_with_features)
        assert metadata.tags == ["generated", "agentforge", "api", "caching"]
        assert metadata.agentforge.generated is True
        assert metadata.agentforge.quality_score == 0
        assert metadata.agentforge.complexity is Complexity.ADVANCED
        assert metadata.agentforge.features == ["api", "caching"]

    def test_missing_name_falls_back_to_slug(self, nameless_skill_md, request_with_features):
        metadata = extract_metadata(nameless_skill_md, request_with_features)
        assert metadata.name == "weather-forecasting-skill"
        assert metadata.version == "1.2.0"

    def test_no_header_uses_request_defaults(self, request_with_features):
        metadata = extract_metadata("# Plain document", request_with_features)
        assert metadata.name == "weather-forecasting-skill"
        assert metadata.description == "Weather Forecasting Skill!!"
        assert metadata.version == "1.0.0"

    def test_parse_failure_recovers(self, monkeypatch, sample_skill_md, request_with_features):
        def boom(text):
            raise RuntimeError("parser exploded")

        monkeypatch.setattr(metadata_module, "parse_frontmatter", boom)
        metadata = extract_metadata(sample_skill_md, request_with_features)
        assert metadata.name == "weather-forecasting-skill"
        assert metadata.version == "1.0.0"

    def test_empty_features(self):
        metadata = extract_metadata("", GenerationRequest(description="x"))
        assert metadata.tags == ["generated", "agentforge"]


class TestExtractDependencies:
    def test_all_import_forms(self):
        text = "\n".join(
            [
                "import axios from 'axios';",
                'import { z } from "zod";',
                "import 'dotenv/config';",
                "const fs = require('fs-extra');",
                "export * from './types';",
            ]
        )
        assert extract_dependencies(text) == ["./types", "axios", "dotenv/config", "fs-extra", "zod"]

    def test_multiline_named_import(self):
        text = "import {\n  Connection,\n  PublicKey,\n} from '@solana/web3.js';"
        assert extract_dependencies(text) == ["@solana/web3.js"]

    def test_deduplicates_across_files(self):
        files = [
            CodeFile(filename="a.ts", content="import axios from 'axios';"),
            CodeFile(filename="b.ts", content="const lodash = require('lodash');\nimport axios from 'axios';"),
        ]
        assert extract_dependencies("import axios from 'axios';", files) == ["axios", "lodash"]

    def test_no_imports(self):
        assert extract_dependencies("# Nothing to see\n\nJust prose about importing data.") == []

    def test_sample_document(self, sample_skill_md):
        assert extract_dependencies(sample_skill_md) == ["axios", "date-fns"]
