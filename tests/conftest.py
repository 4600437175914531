from __future__ import annotations

"""Pytest fixtures shared by the event model and encoder tests.

Entities are built through the public builders, leaf first, exactly as a
caller in the download pipeline would assemble them.
"""

import sys
from pathlib import Path

import pytest

# Ensure project root on PYTHONPATH so `import ml_download_events` works when
# pytest is run from a source checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from ml_download_events.models import (  # noqa: E402
    DownloadStatus,
    ErrorCode,
    ModelDownloadLogEvent,
    ModelInfo,
    ModelOptions,
    SystemInfo,
)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def model_info() -> ModelInfo:
    return ModelInfo.builder().set_name("mobilenet_v1").set_hash("abc123").build()


@pytest.fixture()
def model_options(model_info) -> ModelOptions:
    return ModelOptions.builder().set_model_info(model_info).build()


@pytest.fixture()
def download_event(model_options) -> ModelDownloadLogEvent:
    return (
        ModelDownloadLogEvent.builder()
        .set_error_code(ErrorCode.NO_ERROR)
        .set_download_status(DownloadStatus.SUCCEEDED)
        .set_rough_download_duration_ms(500)
        .set_exact_download_duration_ms(487)
        .set_model_options(model_options)
        .build()
    )


@pytest.fixture()
def system_info() -> SystemInfo:
    return (
        SystemInfo.builder()
        .set_app_id("com.example.app")
        .set_app_version("1.2.3")
        .set_api_key("AIza-test-key")
        .set_firebase_project_id("example-project")
        .build()
    )

