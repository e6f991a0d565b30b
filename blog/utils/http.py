"""HTTP-related utility helpers."""


def is_ajax(request):
    """Detect fetch/XMLHttpRequest callers or an explicit ajax query flag."""
    xhr_header = request.headers.get("x-requested-with")
    accepts_json = "application/json" in request.headers.get("accept", "")
    return bool(
        xhr_header == "XMLHttpRequest"
        or accepts_json
        or request.GET.get("ajax") == "1"
    )
