"""Tests for configuration selection and sample data seeding."""
import pytest

from petclinic.config.settings import (
    DevelopmentConfig,
    ProductionConfig,
    TestingConfig,
    get_config,
)
from petclinic.infrastructure.factories.repository_factory import RepositoryFactory
from petclinic.infrastructure.sample_data import SAMPLE_PET_TYPES, seed_sample_data


@pytest.mark.parametrize("env,expected", [
    ("development", DevelopmentConfig),
    ("production", ProductionConfig),
    ("testing", TestingConfig),
    ("unknown", DevelopmentConfig),
])
def test_get_config_by_environment(monkeypatch, env, expected):
    monkeypatch.setenv("FLASK_ENV", env)
    assert get_config() is expected


def test_validate_rejects_unknown_storage():
    class BadConfig(TestingConfig):
        PET_STORAGE_TYPE = "cassandra"

    with pytest.raises(ValueError):
        BadConfig.validate()


def test_seed_sample_data_only_once():
    owners, pets = RepositoryFactory.create_repositories("memory")

    assert seed_sample_data(owners, pets)
    assert not seed_sample_data(owners, pets)

    assert len(pets.find_pet_types()) == len(SAMPLE_PET_TYPES)
    george = owners.find_by_id(1)
    assert george.last_name == "Franklin"
    assert [pet.name for pet in george.pets] == ["Leo"]
