#!/usr/bin/env python3
"""
Quick profiling harness for the Bowyer-Watson engine.

- Builds a triangulation of uniformly random points
- Prints build statistics (insertions, bad triangles, pool usage, timings)
- Optionally records a cProfile session and prints hotspots
- Optionally verifies the empty-circumcircle property and writes a VTK file
"""
import argparse
import io
import time

import numpy as np

from watson import BowyerWatson, DelaunayConfig, configure_logging, format_stats_table
from watson.core.io import write_vtk
from watson.core.validation import delaunay_violations


def run_once(npts: int, seed: int, strip_super: bool, check: bool,
             profile: bool, profile_out: str, vtk_out: str):
    rng = np.random.default_rng(seed)
    pts = rng.uniform(-10.0, 10.0, size=(npts, 2))
    engine = BowyerWatson(pts, config=DelaunayConfig(strip_super=strip_super, log_every=max(1, npts // 10)))

    t0 = time.perf_counter()
    if profile:
        import cProfile
        import pstats
        pr = cProfile.Profile()
        pr.enable()
        engine.build()
        pr.disable()
        t1 = time.perf_counter()
        s = io.StringIO()
        pstats.Stats(pr, stream=s).sort_stats('cumtime').print_stats(25)
        print("\n[hotspots] top 25 by cumulative time:\n" + s.getvalue())
        if profile_out:
            pr.dump_stats(profile_out)
            print(f"[hotspots] raw pstats written to {profile_out}")
    else:
        engine.build()
        t1 = time.perf_counter()

    print("\n[build stats]")
    print(format_stats_table(engine.stats.to_dict()))
    print(f"\n[pools] triangles created={engine.triangle_pool.created} misses={engine.triangle_pool.misses}"
          f"  edges created={engine.edge_pool.created} misses={engine.edge_pool.misses}")

    if check:
        bad = delaunay_violations(engine.triangles, engine.vertices)
        print(f"[check] delaunay violations: {len(bad)}")

    points, tris = engine.to_arrays()
    if vtk_out:
        flags = np.asarray([t.completed for t in engine.result_triangles()], dtype=float)
        write_vtk(vtk_out, points, tris, cell_data={'completed': flags})
        print(f"[vtk] written to {vtk_out}")
    print(f"\n[summary] wall_time_s={t1 - t0:.3f}  ntri={len(tris)}  npts={len(points)}"
          f"  completed={engine.completed_count}")


def main():
    ap = argparse.ArgumentParser(description='Profile a random Bowyer-Watson build and print stats and hotspots.')
    ap.add_argument('--npts', type=int, default=10000)
    ap.add_argument('--seed', type=int, default=1)
    ap.add_argument('--strip-super', action='store_true', help='Drop triangles touching the super quad')
    ap.add_argument('--check', action='store_true', help='Verify the empty-circumcircle property after the build')
    ap.add_argument('--profile', action='store_true', help='Enable cProfile and print top hotspots')
    ap.add_argument('--profile-out', type=str, default=None, help='Write raw cProfile stats to this .pstats file when --profile is set')
    ap.add_argument('--vtk-out', type=str, default=None, help='Write the final mesh to this legacy VTK file')
    ap.add_argument('--log-level', type=str, default='INFO')
    args = ap.parse_args()

    configure_logging(args.log_level)
    run_once(
        npts=args.npts,
        seed=args.seed,
        strip_super=args.strip_super,
        check=args.check,
        profile=args.profile,
        profile_out=args.profile_out,
        vtk_out=args.vtk_out,
    )


if __name__ == '__main__':
    main()
