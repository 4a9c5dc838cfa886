"""
Example: Orientation-aware decoding with imageorient

This example demonstrates how to:
- Decode a photo so it comes out upright, whatever its EXIF orientation
- Report the displayed dimensions without decoding pixel data
- Read the orientation code on its own
"""
from pathlib import Path
from imageorient import (
    OrientedDecoder,
    DecoderConfig,
    decode_config_file,
    decode_file,
)


def save_upright(image_path: Path, output_path: Path) -> Path:
    """Decode a photo and save it upright."""
    img, format_name = decode_file(image_path)
    print(f"Decoded {format_name} image: {img.width}x{img.height}")

    img.save(output_path)
    return output_path


def describe(image_path: Path):
    """Print stored orientation and displayed dimensions."""
    decoder = OrientedDecoder(DecoderConfig(formats=["JPEG"]))

    with open(image_path, "rb") as f:
        orientation = decoder.orientation(f)
    print(f"EXIF orientation: {orientation or 'none'}")

    config, format_name = decode_config_file(image_path)
    print(f"Displayed size: {config.width}x{config.height} ({config.mode}, {format_name})")


if __name__ == "__main__":
    import sys

    if len(sys.argv) < 2:
        print("Usage: python decode_oriented.py <image_path> [output_path]")
        sys.exit(1)

    image_path = Path(sys.argv[1])
    if not image_path.exists():
        print(f"Image not found: {image_path}")
        sys.exit(1)

    describe(image_path)

    if len(sys.argv) > 2:
        output = save_upright(image_path, Path(sys.argv[2]))
        print(f"Saved: {output}")
