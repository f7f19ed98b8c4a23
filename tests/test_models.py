import json

import pytest

from bosch_shc_api import (
    ShcDataError,
    ShcDevice,
    ShcErrorResponse,
    ShcMessage,
    ShcRoom,
    ShcScenario,
    STATUS_AVAILABLE,
    STATUS_UNAVAILABLE,
)
from bosch_shc_api.utils import decode_record, get_api_field_mapping, map_api_data_to_model


@pytest.mark.parametrize(
    "model_class, fixture_name",
    [
        (ShcDevice, "device_data"),
        (ShcRoom, "room_data"),
        (ShcScenario, "scenario_data"),
        (ShcMessage, "message_data"),
    ],
)
def test_json_round_trip(request, model_class, fixture_name):
    data = request.getfixturevalue(fixture_name)

    record = decode_record(json.loads(json.dumps(data)), model_class)
    again = decode_record(json.loads(json.dumps(record.to_dict())), model_class)

    assert record.to_dict() == data
    assert again == record


def test_field_mapping_uses_controller_names():
    assert get_api_field_mapping(ShcDevice) == {
        "@type": "type",
        "rootDeviceId": "root_device_id",
        "deviceServiceIds": "device_service_ids",
        "deviceModel": "device_model",
        "roomId": "room_id",
    }


def test_attribute_names_are_not_accepted_for_mapped_fields():
    model_fields, extra_fields = map_api_data_to_model(
        {"id": "hz_1", "type": "not-the-discriminator", "icon_id": "x", "iconId": "icon"}, ShcRoom
    )

    assert model_fields == {"id": "hz_1", "icon_id": "icon"}
    assert extra_fields == {"type": "not-the-discriminator", "icon_id": "x"}


def test_missing_optional_fields_stay_none():
    device = decode_record({"id": "dev-1"}, ShcDevice)

    assert device.name is None
    assert device.device_service_ids is None
    assert device.to_dict() == {"id": "dev-1"}


def test_status_constants():
    assert STATUS_AVAILABLE == "AVAILABLE"
    assert STATUS_UNAVAILABLE == "UNAVAILABLE"
    assert ShcDevice(id="d", status=STATUS_AVAILABLE).is_available
    assert not ShcDevice(id="d", status="UPDATE_AVAILABLE").is_available


@pytest.mark.parametrize("model_class", [ShcDevice, ShcRoom, ShcScenario])
@pytest.mark.parametrize("bad_id", ["", None, 12])
def test_identifier_must_be_non_empty_string(model_class, bad_id):
    with pytest.raises(ValueError):
        model_class(id=bad_id)


def test_message_without_id_is_accepted():
    message = decode_record({"@type": "message", "timestamp": 1}, ShcMessage)

    assert message.id is None
    assert message.get("timestamp") == 1
    assert message.get("missing", "default") == "default"


def test_decode_record_rejects_non_objects():
    with pytest.raises(ShcDataError):
        decode_record(["id", "hz_1"], ShcRoom)


def test_error_response_decoding():
    error = decode_record(
        {"@type": "JsonRestExceptionResponseEntity", "errorCode": "ENTITY_NOT_FOUND", "statusCode": 404},
        ShcErrorResponse,
    )

    assert error == ShcErrorResponse(
        type="JsonRestExceptionResponseEntity", error_code="ENTITY_NOT_FOUND", status_code=404
    )
    assert decode_record({}, ShcErrorResponse).error_code is None


@pytest.mark.parametrize(
    "data",
    [{"errorCode": 404}, {"errorCode": ["ENTITY_NOT_FOUND"]}, {"statusCode": "404"}, {"statusCode": True}],
)
def test_error_response_rejects_wrong_field_types(data):
    with pytest.raises(ShcDataError):
        decode_record(data, ShcErrorResponse)
