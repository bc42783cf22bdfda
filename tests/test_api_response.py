from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from postboard.core.response import schemas


class Item(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    item_id: int


def test_success_defaults():
    envelope = schemas.success({"a": 1})

    assert envelope.to_content() == {
        "success": True,
        "message": "Success",
        "data": {"a": 1},
        "statusCode": 200,
    }


def test_success_custom_message_and_status():
    envelope = schemas.success([1, 2], message="Created", status_code=201)

    assert envelope.success is True
    assert envelope.message == "Created"
    assert envelope.status_code == 201


def test_error_defaults():
    assert schemas.error().to_content() == {
        "success": False,
        "message": "Error",
        "data": None,
        "statusCode": 500,
    }


def test_error_with_data():
    envelope = schemas.error("Nope", 404, data={"id": 3})

    assert envelope.to_content()["data"] == {"id": 3}
    assert envelope.to_content()["statusCode"] == 404


def test_nested_models_use_wire_names():
    content = schemas.success([Item(item_id=1), Item(item_id=2)]).to_content()

    assert content["data"] == [{"itemId": 1}, {"itemId": 2}]
