# art_portfolio/utils.py
import re

from werkzeug.datastructures import ImmutableMultiDict

FORBIDDEN_KEY_CHARS = re.compile(r'[$.]')


def sanitize_key(key, replace_with='_'):
    return FORBIDDEN_KEY_CHARS.sub(replace_with, key)


def sanitize_keys(multidict, replace_with='_'):
    """Copies a MultiDict, replacing '$' and '.' in every key."""
    items = [(sanitize_key(key, replace_with), value) for key, value in multidict.items(multi=True)]
    return ImmutableMultiDict(items)


def is_valid_email(email):
    if not email:
        return False
    regex = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'
    return re.match(regex, email) is not None


def is_safe_redirect_target(target):
    """Only local absolute paths are accepted as post-login destinations."""
    return bool(target) and target.startswith('/') and not target.startswith('//')
