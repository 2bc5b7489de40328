from .content import assert_required, assert_string_list
from .exceptions import InvariantViolation

def assert_blog_post(post):
    assert_required(post, ("title", "slug", "excerpt"))
    assert_string_list(post, "tags")

    read_time = post.read_time
    if read_time is not None and (not isinstance(read_time, int) or isinstance(read_time, bool) or read_time < 1):
        raise InvariantViolation("read_time must be a whole number of minutes, at least 1")

BLOG_POST_FIELD_TYPES = {
    "title": str, "slug": str, "excerpt": str, "content": str,
    "image_url": str, "category": str, "tags": list, "read_time": int,
    "featured": bool, "meta_title": str, "meta_description": str,
    "published": bool,
}
