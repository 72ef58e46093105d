import json
import os
import shutil
import tempfile
import unittest

import yaml  # For creating test files
from yaml_parser import (
    load_story_file,
    normalize_key,
    normalize_keys_recursive,
)


class TestStoryFileParsing(unittest.TestCase):
    def setUp(self):
        self.test_dir = tempfile.mkdtemp(prefix="story_files_")

        self.valid_yaml_content = {
            "Series Title": "Night Shift",
            "mainCharacters": [{"name": "Alex", "internalConflict": "Fear"}],
        }
        self.valid_yaml_filepath = os.path.join(self.test_dir, "bible.yaml")
        with open(self.valid_yaml_filepath, "w", encoding="utf-8") as f:
            yaml.dump(self.valid_yaml_content, f)

        self.valid_json_filepath = os.path.join(self.test_dir, "episode.json")
        with open(self.valid_json_filepath, "w", encoding="utf-8") as f:
            json.dump({"title": "Pilot", "episodeNumber": 1}, f)

        self.malformed_yaml_filepath = os.path.join(self.test_dir, "malformed.yaml")
        with open(self.malformed_yaml_filepath, "w", encoding="utf-8") as f:
            f.write("Series Title: Title: Night\ngenre: [horror")

        self.malformed_json_filepath = os.path.join(self.test_dir, "malformed.json")
        with open(self.malformed_json_filepath, "w", encoding="utf-8") as f:
            f.write('{"title": ')

        self.empty_yaml_filepath = os.path.join(self.test_dir, "empty.yaml")
        with open(self.empty_yaml_filepath, "w", encoding="utf-8") as f:
            f.write("")

        self.non_dict_root_yaml_filepath = os.path.join(
            self.test_dir, "non_dict_root.yml"
        )
        with open(self.non_dict_root_yaml_filepath, "w", encoding="utf-8") as f:
            f.write("- item1\n- item2")

    def tearDown(self):
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def test_load_yaml_normalized_keys(self):
        data = load_story_file(self.valid_yaml_filepath, normalize_keys=True)
        self.assertIsNotNone(data)
        if data:  # for mypy
            self.assertEqual(data["series_title"], "Night Shift")
            self.assertEqual(data["main_characters"][0]["internal_conflict"], "Fear")

    def test_load_yaml_raw_keys(self):
        data = load_story_file(self.valid_yaml_filepath, normalize_keys=False)
        self.assertIsNotNone(data)
        if data:  # for mypy
            self.assertIn("Series Title", data)
            self.assertIn("mainCharacters", data)

    def test_load_json(self):
        data = load_story_file(self.valid_json_filepath)
        self.assertEqual(data, {"title": "Pilot", "episode_number": 1})

    def test_load_non_existent_file(self):
        self.assertIsNone(load_story_file(os.path.join(self.test_dir, "missing.yaml")))

    def test_load_malformed_files(self):
        self.assertIsNone(load_story_file(self.malformed_yaml_filepath))
        self.assertIsNone(load_story_file(self.malformed_json_filepath))

    def test_load_empty_yaml(self):
        self.assertEqual(load_story_file(self.empty_yaml_filepath), {})

    def test_load_non_dict_root_yaml(self):
        self.assertIsNone(load_story_file(self.non_dict_root_yaml_filepath))

    def test_normalize_key(self):
        self.assertEqual(normalize_key("seriesTitle"), "series_title")
        self.assertEqual(normalize_key("Series Title"), "series_title")
        self.assertEqual(normalize_key("series-title"), "series_title")
        self.assertEqual(normalize_key("episode_number"), "episode_number")

    def test_normalize_keys_recursive(self):
        data = {
            "World Building": {"culturalContext": "value1"},
            "mainCharacters": [{"Internal Conflict": 1}, {"premiseRole": 2}],
        }
        expected = {
            "world_building": {"cultural_context": "value1"},
            "main_characters": [{"internal_conflict": 1}, {"premise_role": 2}],
        }
        self.assertEqual(normalize_keys_recursive(data), expected)

    def test_free_text_mappings_keep_their_keys(self):
        data = {
            "mainCharacters": [
                {
                    "Name": "Alex",
                    "relationships": {"Sam Smith": "only friend", "DrKeane": "rival"},
                }
            ],
            "narrativeElements": {"recurringMotifs": {"Red Door": "threshold"}},
        }
        normalized = normalize_keys_recursive(data)
        character = normalized["main_characters"][0]
        self.assertEqual(character["name"], "Alex")
        self.assertEqual(
            character["relationships"], {"Sam Smith": "only friend", "DrKeane": "rival"}
        )
        self.assertEqual(
            normalized["narrative_elements"]["recurring_motifs"],
            {"Red Door": "threshold"},
        )


if __name__ == "__main__":
    unittest.main()
