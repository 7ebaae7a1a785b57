"""
pageslug Example: Fingerprint and Render Demo
═════════════════════════════════════════════

Walks through a typical build step:
  1. Build output is written without fingerprints
  2. Each asset is renamed to embed its content hash
  3. A rebuild leaves a stale fingerprinted file behind
  4. The page is rendered against the newest file per asset

Run: python examples/render_demo.py
"""

import sys
import tempfile
import time
from pathlib import Path

# Add src to path for direct execution
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pageslug.fingerprint.renamer import fingerprint_file
from pageslug.manifest.builder import build_manifest
from pageslug.manifest.lookup import ManifestIndex
from pageslug.render.page import PageRenderer


def main():
    print("🔥 pageslug — Fingerprint and Render Demo")
    print("=" * 50)

    with tempfile.TemporaryDirectory(prefix="pageslug_demo_") as tmpdir:
        public = Path(tmpdir)

        # ─── Step 1: Build output ───
        print("\n📦 Step 1: Writing build output...")
        (public / "style.css").write_text("body { margin: 0; }\n", encoding="utf-8")
        (public / "index.js").write_text("console.log('v1');\n", encoding="utf-8")

        # ─── Step 2: Fingerprint ───
        print("\n🔢 Step 2: Fingerprinting assets...")
        for name in ("style.css", "index.js"):
            target = fingerprint_file(public / name)
            print(f"   {name} -> {target.name}")

        # ─── Step 3: Rebuild ───
        print("\n♻️  Step 3: Rebuilding index.js (old file stays behind)...")
        time.sleep(0.01)
        (public / "index.js").write_text("console.log('v2');\n", encoding="utf-8")
        target = fingerprint_file(public / "index.js")
        print(f"   index.js -> {target.name}")

        # ─── Step 4: Render ───
        print("\n📄 Step 4: Rendering page...")
        manifest = build_manifest(sorted(public.iterdir()))
        for key, entry in manifest.items():
            print(f"   {key:<12} {entry.name}")

        html = PageRenderer(ManifestIndex(manifest)).render_default()
        print()
        print(html)

    print("=" * 50)
    print("✅ Demo complete!")


if __name__ == "__main__":
    main()
