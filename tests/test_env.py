import pytest

from tonekit import env
from tonekit.env import EnvError, Settings, current, env_value, environment, load

FULL = {"PLATFORM": "plat", "SERVICE": "svc", "ENV": "prod", "VERSION": "v1", "ID": "node-1"}


def test_load_reads_values():
    settings = load(FULL)
    assert (settings.platform, settings.service, settings.env, settings.version, settings.id) == (
        "plat",
        "svc",
        "prod",
        "v1",
        "node-1",
    )


def test_port_defaults_to_80():
    assert load(FULL).port == 80


def test_port_parsed():
    assert load({**FULL, "PORT": "8080"}).port == 8080


def test_bad_port_keeps_default():
    assert load({**FULL, "PORT": "80x"}).port == 80


def test_check_defaults_host():
    assert load(FULL).check().host == "0.0.0.0"


def test_check_keeps_host():
    assert load({**FULL, "HOST": "127.0.0.1"}).check().host == "127.0.0.1"


@pytest.mark.parametrize("missing", ["PLATFORM", "SERVICE", "ENV", "VERSION"])
def test_check_requires_values(missing):
    environ = {k: v for k, v in FULL.items() if k != missing}
    with pytest.raises(EnvError, match=f"请设置环境变量: {missing}"):
        load(environ).check()


@pytest.mark.parametrize(
    "name, checker",
    [
        ("prod", Settings.is_prod),
        ("test", Settings.is_testing),
        ("dev", Settings.is_develop),
        ("uat", Settings.is_uat),
    ],
)
def test_environment_predicates(name, checker):
    assert checker(Settings(env=name)) is True
    assert checker(Settings(env="other")) is False


def test_current_is_cached_and_matches_environment():
    assert current() is current()
    assert environment() == current().env


def test_env_value_string():
    assert env_value("NAME", "fallback", True, {"NAME": "given"}) == "given"
    assert env_value("NAME", "fallback", True, {}) == "fallback"


def test_env_value_string_missing_raises():
    with pytest.raises(EnvError, match="ENV NAME is empty"):
        env_value("NAME", "fallback", False, {})


def test_env_value_int():
    assert env_value("N", 3, True, {"N": "42"}) == 42
    assert env_value("N", 3, True, {"N": "nope"}) == 3


def test_env_value_int_bad_raises():
    with pytest.raises(EnvError, match="ENV N is err value: nope"):
        env_value("N", 3, False, {"N": "nope"})


@pytest.mark.parametrize("text, expected", [("T", True), ("true", True), ("0", False), ("FALSE", False)])
def test_env_value_bool(text, expected):
    assert env_value("B", not expected, False, {"B": text}) is expected


def test_env_value_bool_default_and_error():
    assert env_value("B", True, True, {"B": "yes"}) is True
    with pytest.raises(EnvError):
        env_value("B", True, False, {"B": "yes"})


def test_env_value_unsupported_type():
    with pytest.raises(TypeError):
        env_value("X", 1.5, True, {})


def test_constants_drive_environment_predicates():
    assert load({**FULL, "ENV": env.ENV_PROD}).is_prod() is True
    assert load({**FULL, "ENV": env.ENV_UAT}).is_uat() is True
    assert load({**FULL, "ENV": env.ENV_TESTING}).is_testing() is True
    assert load({**FULL, "ENV": env.ENV_DEVELOP}).is_develop() is True
    assert load({**FULL, "ENV": env.ENV_DEVELOP}).is_prod() is False