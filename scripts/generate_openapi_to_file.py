"""Script to generate openapi.yaml for the converter API and save it for inspection."""
import sys
import yaml
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dtogen.main import app

output_dir = Path(__file__).parent.parent / "test_output"
output_dir.mkdir(exist_ok=True)
openapi_path = output_dir / "openapi.yaml"

openapi_path.write_text(yaml.safe_dump(app.openapi(), sort_keys=False), encoding="utf-8")

print("=" * 60)
print("OPENAPI.YAML GENERATION")
print("=" * 60)
print(f"Generated file location:")
print(f"  {openapi_path}")
print(f"  (Absolute: {openapi_path.absolute()})")
print(f"File size: {openapi_path.stat().st_size} bytes")
