#!/usr/bin/env python3
# Render TSV grids (as written by `cavegen emit`) to PNGs using Pillow.

import argparse, glob, os

from cavegen.render.image import render_grid, save_png
from cavegen.tsv import read_tsv

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--indir", type=str, default="out/tsv", help="Directory containing TSVs")
    ap.add_argument("--outdir", type=str, default="out/png", help="Where to write PNGs")
    ap.add_argument("--tile", type=int, default=4, help="Tile size in pixels")
    args = ap.parse_args()

    paths = sorted(glob.glob(os.path.join(args.indir, "*.tsv")))
    if not paths:
        raise SystemExit(f"no .tsv files in {args.indir}")
    for tsv in paths:
        name = os.path.splitext(os.path.basename(tsv))[0]
        save_png(render_grid(read_tsv(tsv), tile_size=args.tile), os.path.join(args.outdir, f"{name}.png"))
    print(f"Wrote {len(paths)} PNGs to {args.outdir}")

if __name__ == "__main__":
    main()
