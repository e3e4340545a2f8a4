"""Write composed interfaces to the project's interface file."""

from pathlib import Path

from swagger_interfaces.generator.interface import IMPORT_HEADER


def write_interface_file(content: str, output_path: Path) -> Path:
    """Write the import header plus content to output_path, creating directories."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(IMPORT_HEADER + content, encoding="utf-8")
    return output_path
