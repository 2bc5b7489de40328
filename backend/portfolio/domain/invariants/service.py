from .content import assert_required, assert_string_list
from .exceptions import InvariantViolation

def assert_service(service):
    assert_required(service, ("title", "description"))
    assert_string_list(service, "features")

    order_index = service.order_index
    if order_index is not None and (not isinstance(order_index, int) or isinstance(order_index, bool)):
        raise InvariantViolation("order_index must be an integer")

SERVICE_FIELD_TYPES = {
    "title": str, "description": str, "icon": str, "features": list,
    "price": str, "order_index": int, "published": bool,
}
