"""Tests for the skill registry and visibility settings."""

from skillstats.skills.registry import (
    SKILL_NAMES,
    SkillDefinition,
    get_skill,
    list_skills,
    natural_sort_key,
    skill_keys,
)
from skillstats.skills.visibility import (
    SETTINGS_TITLE,
    VisibilityFilter,
    VisibilitySettings,
    coerce_bool,
    settings_definition,
)

from .helpers import only_enabled


class TestNaturalSortKey:
    def test_digits_compare_numerically(self):
        keys = ["skill10", "skill2", "skill1"]
        assert sorted(keys, key=natural_sort_key) == ["skill1", "skill2", "skill10"]

    def test_case_insensitive(self):
        keys = ["beta", "Alpha", "gamma", "Delta"]
        assert sorted(keys, key=natural_sort_key) == ["Alpha", "beta", "Delta", "gamma"]

    def test_mixed_case_and_digits(self):
        keys = ["Skill10", "skill9", "SKILL1"]
        assert sorted(keys, key=natural_sort_key) == ["SKILL1", "skill9", "Skill10"]


class TestRegistry:
    def test_lists_every_skill(self):
        assert {s.key for s in list_skills()} == set(SKILL_NAMES)

    def test_sorted_by_key(self):
        keys = skill_keys()
        assert keys == sorted(keys, key=natural_sort_key)
        assert keys[0] == "construction"
        assert keys[-1] == "woodcutting"

    def test_deterministic(self):
        assert list_skills() == list_skills()

    def test_keys_unique(self):
        keys = skill_keys()
        assert len(keys) == len(set(keys))

    def test_get_skill(self):
        skill = get_skill("construction")
        assert skill == SkillDefinition("construction", "Construction")
        assert get_skill("alchemy") is None

    def test_derived_names(self):
        skill = get_skill("fishing")
        assert skill.setting_key == "enable_fishing"
        assert skill.level_column == "fishing_level"
        assert skill.experience_column == "fishing_experience"


class TestVisibilitySettings:
    def test_one_field_per_skill_defaulting_to_enabled(self):
        settings = VisibilitySettings()
        for skill in list_skills():
            assert getattr(settings, skill.setting_key) is True

    def test_from_mapping_accepts_skill_and_setting_keys(self):
        settings = VisibilitySettings.from_mapping({"cooking": False, "enable_fishing": "0"})
        assert settings.enable_cooking is False
        assert settings.enable_fishing is False
        assert settings.enable_hunter is True

    def test_from_mapping_ignores_unknown(self):
        settings = VisibilitySettings.from_mapping({"alchemy": False})
        assert settings == VisibilitySettings()

    def test_from_source_queries_each_setting(self):
        stored = {"enable_smithing": 0, "enable_cooking": "1"}

        class Source:
            def __init__(self):
                self.asked = []

            def get_setting(self, name):
                self.asked.append(name)
                return stored.get(name)

        source = Source()
        settings = VisibilitySettings.from_source(source)
        assert source.asked == [s.setting_key for s in list_skills()]
        assert settings.enable_smithing is False
        assert settings.enable_cooking is True
        assert settings.enable_woodcutting is True

    def test_coerce_bool(self):
        assert coerce_bool("1") is True
        assert coerce_bool("yes") is True
        assert coerce_bool(" off ") is False
        assert coerce_bool("") is False
        assert coerce_bool(0) is False
        assert coerce_bool(2) is True


class TestVisibilityFilter:
    def test_all_enabled_by_default(self):
        assert VisibilityFilter().enabled_skills() == list_skills()

    def test_subset_in_registry_order(self):
        enabled = only_enabled("woodcutting", "construction", "hunter").enabled_skills()
        assert [s.key for s in enabled] == ["construction", "hunter", "woodcutting"]

    def test_none_enabled(self):
        assert only_enabled().enabled_skills() == ()

    def test_settings_definition(self):
        definition = settings_definition()
        assert definition["title"] == SETTINGS_TITLE
        assert definition["enable_construction"] == (
            "Show Construction skill in character stats,bool|1"
        )
        assert len(definition) == len(list_skills()) + 1
