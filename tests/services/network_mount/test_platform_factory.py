from unittest.mock import patch

import pytest

from davmount.config import Settings
from davmount.services.network_mount import PlatformFactory, UnsupportedPlatformError
from davmount.services.network_mount.gio_mounter import GioMounter


@pytest.fixture
def factory() -> PlatformFactory:
    return PlatformFactory(Settings(gio_command="/usr/bin/gio"))


def test_detect_linux(factory):
    with patch("platform.system", return_value="Linux"):
        assert factory.detect_platform() == "linux"


@pytest.mark.parametrize("system", ["Darwin", "Windows", "Plan9"])
def test_other_platforms_are_unsupported(factory, system):
    with patch("platform.system", return_value=system):
        with pytest.raises(UnsupportedPlatformError) as exc_info:
            factory.detect_platform()

    assert system.lower() in str(exc_info.value)


def test_linux_creates_gio_mounter(factory):
    with patch("platform.system", return_value="Linux"):
        mounter = factory.create_mounter()

    assert isinstance(mounter, GioMounter)
    assert mounter._gio_command == "/usr/bin/gio"


@pytest.mark.parametrize("system", ["Darwin", "Windows"])
def test_no_mounter_outside_linux(factory, system):
    with patch("platform.system", return_value=system):
        with pytest.raises(UnsupportedPlatformError):
            factory.create_mounter()
