from __future__ import annotations

import json

from result import Err, Ok

from dirwiz.config.loader import load_config, sample_config_json
from dirwiz.models.enums import ErrorPolicy, SplitPolicy
from tests.fs_mock import MemoryFileSystem


class TestLoadConfig:
    def test_missing_uses_defaults(self) -> None:
        result = load_config(fs=MemoryFileSystem())
        assert isinstance(result, Ok)
        assert result.unwrap().split_policy is SplitPolicy.DEPTH

    def test_valid_json_dict(self) -> None:
        fs = MemoryFileSystem()
        fs.add_file(
            "/mock/home/.config/dirwiz/config.json",
            content=json.dumps({"splitPolicy": "subtree", "onError": "skip"}),
        )
        result = load_config(fs=fs)
        assert isinstance(result, Ok)
        cfg = result.unwrap()
        assert cfg.split_policy is SplitPolicy.SUBTREE
        assert cfg.on_error is ErrorPolicy.SKIP

    def test_non_dict_json_returns_err(self) -> None:
        fs = MemoryFileSystem()
        fs.add_file("/mock/home/.config/dirwiz/config.json", content=json.dumps([1, 2, 3]))
        result = load_config(fs=fs)
        assert isinstance(result, Err)
        assert "must be a JSON object" in result.unwrap_err()

    def test_invalid_json_returns_err(self) -> None:
        fs = MemoryFileSystem()
        fs.add_file("/custom/config.json", content="not-json")
        result = load_config(path="/custom/config.json", fs=fs)
        assert isinstance(result, Err)
        assert "failed reading config" in result.unwrap_err().lower()

    def test_unknown_policy_returns_err(self) -> None:
        fs = MemoryFileSystem()
        fs.add_file("/custom/config.json", content=json.dumps({"splitPolicy": "bfs"}))
        result = load_config(path="/custom/config.json", fs=fs)
        assert isinstance(result, Err)
        message = result.unwrap_err()
        assert "splitPolicy must be one of depth, subtree" in message
        assert "'bfs'" in message

    def test_unknown_error_policy_names_key(self) -> None:
        fs = MemoryFileSystem()
        fs.add_file("/custom/config.json", content=json.dumps({"onError": "retry"}))
        result = load_config(path="/custom/config.json", fs=fs)
        assert isinstance(result, Err)
        assert "onError must be one of abort, skip" in result.unwrap_err()

    def test_string_bool_rejected(self) -> None:
        fs = MemoryFileSystem()
        fs.add_file("/custom/config.json", content=json.dumps({"autoInterleave": "false"}))
        result = load_config(path="/custom/config.json", fs=fs)
        assert isinstance(result, Err)
        assert "autoInterleave must be true or false" in result.unwrap_err()

    def test_non_integer_threshold_rejected(self) -> None:
        fs = MemoryFileSystem()
        fs.add_file("/custom/config.json", content=json.dumps({"splitThreshold": "2"}))
        result = load_config(path="/custom/config.json", fs=fs)
        assert isinstance(result, Err)
        assert "splitThreshold must be an integer" in result.unwrap_err()

    def test_custom_path(self) -> None:
        fs = MemoryFileSystem()
        fs.add_file("/custom/config.json", content=json.dumps({"topCount": 5}))
        result = load_config(path="/custom/config.json", fs=fs)
        assert isinstance(result, Ok)
        assert result.unwrap().top_count == 5

    def test_sample_config_json_is_valid(self) -> None:
        parsed = json.loads(sample_config_json())
        assert isinstance(parsed, dict)
        assert parsed["splitPolicy"] == "depth"
