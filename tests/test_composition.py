from ml_download_events import (
    EventName,
    LogEvent,
    SystemInfo,
    attach_system_info,
)


def _event(download_event=None) -> LogEvent:
    return (
        LogEvent.builder()
        .set_event_name(EventName.MODEL_DOWNLOAD)
        .set_model_download_log_event(download_event)
        .build()
    )


def test_attach_leaves_original_untouched(system_info, download_event):
    e1 = _event(download_event)
    e2 = attach_system_info(e1, system_info)

    assert e2.system_info == system_info
    assert e1.system_info is None
    assert e2 is not e1


def test_attach_keeps_other_fields(system_info, download_event):
    e2 = _event(download_event).with_system_info(system_info)
    assert e2.event_name is EventName.MODEL_DOWNLOAD
    assert e2.model_download_log_event == download_event


def test_attach_replaces_existing_system_info(system_info):
    other = (
        SystemInfo.builder()
        .set_app_id("com.example.other")
        .set_app_version("9.9")
        .set_api_key("other-key")
        .set_firebase_project_id("other-project")
        .build()
    )
    first = _event().with_system_info(system_info)
    second = first.with_system_info(other)
    assert second.system_info == other
    assert first.system_info == system_info


def test_to_builder_produces_modified_copy(download_event):
    original = _event(download_event)
    update = original.to_builder().set_event_name(EventName.MODEL_UPDATE).build()
    assert update.event_name is EventName.MODEL_UPDATE
    assert update.model_download_log_event == download_event
    assert original.event_name is EventName.MODEL_DOWNLOAD


def test_to_builder_round_trip_is_equal(system_info, download_event):
    original = _event(download_event).with_system_info(system_info)
    assert original.to_builder().build() == original
