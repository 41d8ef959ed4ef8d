"""
main.py
--------
Izakaya Tilemap Pipeline Entrypoint

Stages:
1️⃣ Map document parsing (floors.map_data)
2️⃣ Zone population per floor (tilemap.populator)
3️⃣ Tile map export + previews (common.plot_utils)
"""

import os
import json
import argparse
from typing import Dict, Optional

from fastapi import FastAPI, HTTPException

# --- Pipeline modules ---
from floors import MapData, parse_map_response, populate_map
from tilemap.errors import MapParseError, ZoneMapError

# --- Common utilities ---
from common.config import get_log_level_name, load_config
from common.io_utils import log, parse_log_level, read_text, safe_name, setup_logging, write_json
from common.plot_utils import visualize_tile_grid

# -----------------------------------------------------
# FastAPI setup
# -----------------------------------------------------

app = FastAPI(title="Izakaya Tilemap API", version="1.0.0")

# -----------------------------------------------------
# Pydantic input model for /populate
# -----------------------------------------------------

class PopulateRequest(MapData):
    seed: Optional[int] = None
    fallback: bool = False

# -----------------------------------------------------
# Core pipeline
# -----------------------------------------------------

def run_pipeline(map_data: MapData, output_dir: str, seed: Optional[int] = None) -> Dict[str, str]:
    """
    Executes the full flow:
      zone map → tilemap.json → tilemap_preview*.png
    """
    os.makedirs(output_dir, exist_ok=True)
    log("🚀 Starting tilemap pipeline...", "INFO")

    config = load_config()
    populated = populate_map(map_data, seed=seed, config=config)

    tilemap_path = os.path.join(output_dir, "tilemap.json")
    write_json(populated.model_dump(), tilemap_path)
    log(f"✅ Tile map saved → {tilemap_path}")

    results = {"tilemap_json": tilemap_path}
    # Zone panel only when the layout was populated rather than replaced by the fallback
    same_shape = [len(r) for r in map_data.layout] == [len(r) for r in populated.layout]
    results["preview_image"] = visualize_tile_grid(
        populated.layout,
        os.path.join(output_dir, "tilemap_preview.png"),
        title=f"{populated.theme} (ground floor)",
        zone_rows=map_data.layout if same_shape else None,
    )
    for key, rows in (populated.floors or {}).items():
        results[f"preview_image_{key}"] = visualize_tile_grid(
            rows,
            os.path.join(output_dir, f"tilemap_preview_{safe_name(key)}.png"),
            title=f"{populated.theme} (floor {key})",
        )

    log("🎉 Pipeline completed successfully!", "OK")
    return results


# -----------------------------------------------------
# API endpoints
# -----------------------------------------------------

@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/populate", response_model=MapData)
def populate_api(request: PopulateRequest):
    """Populate every floor of a zone map and return the tile rows."""
    map_data = MapData(**request.model_dump(exclude={"seed", "fallback"}))
    try:
        return populate_map(map_data, seed=request.seed, config=load_config(), fallback=request.fallback)
    except ZoneMapError as e:
        raise HTTPException(status_code=422, detail=str(e))


# -----------------------------------------------------
# CLI mode
# -----------------------------------------------------

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Izakaya Tilemap CLI")
    parser.add_argument("--input", required=True, help="Path to a map document (JSON or raw LLM answer)")
    parser.add_argument("--out_dir", default="outputs/run", help="Output directory")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible maps")
    parser.add_argument("--log_file", default=None, help="Optional log file")
    args = parser.parse_args()

    setup_logging(parse_log_level(get_log_level_name()), args.log_file)

    try:
        map_data = parse_map_response(read_text(args.input))
    except MapParseError as e:
        log(f"❌ Could not read map document: {e}", "ERROR")
        raise SystemExit(1)

    results = run_pipeline(map_data, args.out_dir, seed=args.seed)

    print("\n=== Tilemap Pipeline Complete ===")
    print(json.dumps(results, indent=2))
