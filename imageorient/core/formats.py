"""
Image format names.
"""
from typing import Optional

# Pillow formats that are still plain JPEG streams underneath.
_FORMAT_ALIASES = {
    'mpo': 'jpeg',
}


def format_name(pil_format: Optional[str]) -> str:
    """Normalize a Pillow format (``"JPEG"``) to a lowercase name (``"jpeg"``)."""
    if not pil_format:
        return ""
    name = pil_format.lower()
    return _FORMAT_ALIASES.get(name, name)
