"""
End-to-end tests for MountCoordinator.

The mount subsystem, error reporter and viewer are mocked; manifests go
through the real parser and URI builder.
"""

from unittest.mock import AsyncMock, Mock, patch

import httpx
import pytest

from davmount.core.exceptions import InvalidTransitionError, MountError
from davmount.models import MountTarget, RunState
from davmount.services.completion_handler import CompletionHandler
from davmount.services.document_source import LocalDocumentSource, RemoteDocumentSource
from davmount.services.error_reporter import ErrorReporter
from davmount.services.mount_coordinator import MountCoordinator
from davmount.services.network_mount import BaseMounter, MountSession
from davmount.services.viewer_launcher import ViewerLauncher
from tests.conftest import make_manifest


@pytest.fixture
def mock_mounter() -> Mock:
    mounter = Mock(spec=BaseMounter)
    mounter.mount = AsyncMock(return_value=None)
    return mounter


@pytest.fixture
def mock_reporter() -> Mock:
    return Mock(spec=ErrorReporter)


@pytest.fixture
def mock_viewer() -> Mock:
    viewer = Mock(spec=ViewerLauncher)
    viewer.open_in_viewer = AsyncMock(return_value=True)
    return viewer


@pytest.fixture
def coordinator(mock_mounter, mock_reporter, mock_viewer) -> MountCoordinator:
    return MountCoordinator(
        mounter=mock_mounter,
        completion_handler=CompletionHandler(mock_reporter, mock_viewer),
    )


def local_source(tmp_path, data: bytes) -> LocalDocumentSource:
    manifest_file = tmp_path / "share.davmount"
    manifest_file.write_bytes(data)
    return LocalDocumentSource(manifest_file)


class TestSuccessfulRun:

    @pytest.mark.asyncio
    async def test_local_manifest_is_mounted_and_opened(
        self, coordinator, tmp_path, valid_manifest, mock_mounter, mock_reporter, mock_viewer
    ):
        final_state = await coordinator.run(local_source(tmp_path, valid_manifest))

        assert final_state == RunState.DONE
        assert coordinator.state == RunState.DONE

        mock_mounter.mount.assert_awaited_once()
        location, session = mock_mounter.mount.call_args[0]
        assert location == "dav://example.com/dav/docs/a.txt"
        assert isinstance(session, MountSession)
        assert session.released

        mock_viewer.open_in_viewer.assert_awaited_once_with("dav://example.com/dav/docs/a.txt")
        mock_reporter.report_error.assert_not_called()

    @pytest.mark.asyncio
    async def test_remote_manifest_is_mounted(self, coordinator, valid_manifest, mock_mounter):
        source = RemoteDocumentSource(
            "https://example.com/share.davmount",
            transport=httpx.MockTransport(lambda request: httpx.Response(200, content=valid_manifest)),
        )

        assert await coordinator.run(source) == RunState.DONE
        assert mock_mounter.mount.call_args[0][0] == "dav://example.com/dav/docs/a.txt"

    @pytest.mark.asyncio
    async def test_session_interactivity_is_passed_through(
        self, mock_mounter, mock_reporter, tmp_path, valid_manifest
    ):
        coordinator = MountCoordinator(
            mounter=mock_mounter,
            completion_handler=CompletionHandler(mock_reporter),
            interactive=False,
        )

        await coordinator.run(local_source(tmp_path, valid_manifest))

        session = mock_mounter.mount.call_args[0][1]
        assert session.interactive is False


class TestFailedRun:

    @pytest.mark.asyncio
    async def test_http_404_never_reaches_parser(self, coordinator, mock_mounter, mock_reporter):
        source = RemoteDocumentSource(
            "http://example.com/missing.davmount",
            transport=httpx.MockTransport(lambda request: httpx.Response(404)),
        )

        with patch("davmount.services.mount_coordinator.parse_manifest") as mock_parse:
            final_state = await coordinator.run(source)

        assert final_state == RunState.FAILED
        mock_parse.assert_not_called()
        mock_mounter.mount.assert_not_called()
        mock_reporter.report_error.assert_called_once_with("HTTP Error", "404 Not Found")

    @pytest.mark.asyncio
    async def test_malformed_remote_url_is_reported_once(self, coordinator, mock_mounter, mock_reporter):
        source = RemoteDocumentSource(
            "http://[::1/m.xml",
            transport=httpx.MockTransport(lambda request: httpx.Response(200)),
        )

        final_state = await coordinator.run(source)

        assert final_state == RunState.FAILED
        assert coordinator.state == RunState.FAILED
        mock_mounter.mount.assert_not_called()
        mock_reporter.report_error.assert_called_once()
        assert mock_reporter.report_error.call_args[0][0] == "HTTP Error"

    @pytest.mark.asyncio
    async def test_missing_local_file(self, coordinator, tmp_path, mock_reporter, mock_mounter):
        final_state = await coordinator.run(LocalDocumentSource(tmp_path / "missing.davmount"))

        assert final_state == RunState.FAILED
        mock_mounter.mount.assert_not_called()
        assert mock_reporter.report_error.call_args[0][0] == "Could not read mount file"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "data, primary",
        [
            (b"<mount", "Could not parse xml"),
            (b"", "XML Document empty"),
            (make_manifest("<url>http://h/</url><open>x</open>", ns="urn:x"), "Not a valid dav mount xml"),
            (make_manifest("<url>http://h/</url>"), "Invalid mount spec"),
            (make_manifest("<url>ftp://h/</url><open>x</open>"), "Unsupported mount location"),
        ],
    )
    async def test_invalid_manifest(
        self, coordinator, tmp_path, mock_mounter, mock_reporter, data, primary
    ):
        final_state = await coordinator.run(local_source(tmp_path, data))

        assert final_state == RunState.INVALID
        mock_mounter.mount.assert_not_called()
        mock_reporter.report_error.assert_called_once()
        assert mock_reporter.report_error.call_args[0][0] == primary

    @pytest.mark.asyncio
    async def test_mount_failure_is_reported_and_session_released(
        self, coordinator, tmp_path, valid_manifest, mock_mounter, mock_reporter, mock_viewer
    ):
        mock_mounter.mount.side_effect = MountError("Authentication failed")

        final_state = await coordinator.run(local_source(tmp_path, valid_manifest))

        assert final_state == RunState.FAILED
        mock_reporter.report_error.assert_called_once_with("Error during mount", "Authentication failed")
        mock_viewer.open_in_viewer.assert_not_called()
        assert mock_mounter.mount.call_args[0][1].released

    @pytest.mark.asyncio
    async def test_mount_is_not_retried(self, coordinator, tmp_path, valid_manifest, mock_mounter):
        mock_mounter.mount.side_effect = MountError("Network unreachable")

        await coordinator.run(local_source(tmp_path, valid_manifest))

        assert mock_mounter.mount.await_count == 1

    @pytest.mark.asyncio
    async def test_unexpected_mounter_error_still_releases_session(
        self, coordinator, tmp_path, valid_manifest, mock_mounter
    ):
        mock_mounter.mount.side_effect = ValueError("bug")

        with pytest.raises(ValueError):
            await coordinator.run(local_source(tmp_path, valid_manifest))

        assert mock_mounter.mount.call_args[0][1].released


class TestSingleRun:

    @pytest.mark.asyncio
    async def test_coordinator_processes_one_manifest(self, coordinator, tmp_path, valid_manifest):
        source = local_source(tmp_path, valid_manifest)
        await coordinator.run(source)

        with pytest.raises(InvalidTransitionError):
            await coordinator.run(source)

    @pytest.mark.asyncio
    async def test_mount_directly_from_target(self, coordinator, mock_mounter):
        # mount() is only legal once the manifest is parsed
        with pytest.raises(InvalidTransitionError):
            await coordinator.mount(MountTarget(mount_uri="dav://h/x"))

        mock_mounter.mount.assert_not_called()
