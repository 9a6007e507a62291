import json
import sys
from pathlib import Path

import yaml

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from api import app

DOCS_DIR = Path(__file__).parent.parent / "docs"


def generate(docs_dir: Path = DOCS_DIR) -> tuple[Path, Path]:
    openapi_schema = app.openapi()
    docs_dir.mkdir(parents=True, exist_ok=True)

    yaml_path = docs_dir / "swagger.yaml"
    json_path = docs_dir / "openapi.json"

    with open(yaml_path, "w", encoding="utf-8") as f:
        yaml.dump(openapi_schema, f, sort_keys=False, default_flow_style=False, allow_unicode=True)

    with open(json_path, "w", encoding="utf-8") as f:
        json.dump(openapi_schema, f, indent=2, ensure_ascii=False)

    return yaml_path, json_path


if __name__ == "__main__":
    yaml_path, json_path = generate()
    print("✅ Generated OpenAPI documentation:")
    print(f"   - {yaml_path}")
    print(f"   - {json_path}")
