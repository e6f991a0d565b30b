from __future__ import annotations
from typing import Dict
from django.conf import settings
from django.http import HttpRequest


def site(request: HttpRequest) -> Dict[str, object]:
  """Expose the public base URL used for shareable post links."""
  return {"public_base_url": settings.PUBLIC_BASE_URL}
