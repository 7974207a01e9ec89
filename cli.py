import argparse
import logging
import os
import sys

from config import LandscapeConfig, load_config
from render.compositor import frame_plan, render_image
from safe_parse import parse_size
from terrain.scene import initialize_from_config


def build_config(args) -> LandscapeConfig:
    cfg = load_config(args.config) if args.config else LandscapeConfig()
    width = height = None
    if args.size:
        width, height = parse_size(args.size)
    return cfg.with_overrides(
        width=width, height=height, layer_count=args.layers,
        seed=args.seed, hue=args.hue,
    )


def cmd_export(args):
    cfg = build_config(args)
    scene = initialize_from_config(cfg)
    img = render_image(scene)
    os.makedirs(os.path.dirname(args.out) or ".", exist_ok=True)
    img.save(args.out)
    print(f"Saved {args.out} | {scene.summary()}")


def cmd_describe(args):
    scene = initialize_from_config(build_config(args))
    top, bottom = scene.palette.top, scene.palette.bottom
    print(scene.summary())
    print(f"sky top    hsb=({top.hue:.1f}, {top.saturation:.1f}, {top.brightness:.1f}) rgb={top.to_rgb()}")
    print(f"sky bottom hsb=({bottom.hue:.1f}, {bottom.saturation:.1f}, {bottom.brightness:.1f}) rgb={bottom.to_rgb()}")
    b = scene.sun.bounds
    print(f"sun x={b.x:.1f} y={b.y:.1f} size={b.width:.1f} rgb={scene.sun.fill.to_rgb()}")
    for layer in scene.layers:
        print(f"layer{layer.index} y={layer.bounds.y:.1f} height={layer.max_height:.1f} "
              f"jagged={layer.jaggedness:.2f} noise=[{layer.start_noise:.2f}, {layer.end_noise:.2f}] "
              f"rgb={layer.fill.to_rgb()}")
    print("draw order: " + " -> ".join(op.label for op in frame_plan(scene)))


def cmd_show(args):
    # pygame is only needed for the window
    from gui.main import LandscapeGUI

    cfg = build_config(args)
    if args.fps:
        cfg = cfg.with_overrides(fps=args.fps)
    LandscapeGUI(config=cfg).run()


def add_scene_args(p):
    p.add_argument("--config", default=None, help="JSON config file")
    p.add_argument("--size", default=None, help="Viewport as WIDTHxHEIGHT, e.g. 800x600")
    p.add_argument("--layers", type=int, default=None, help="Number of mountain ranges")
    p.add_argument("--seed", type=int, default=None, help="RNG seed")
    p.add_argument("--hue", type=float, default=None, help="Fixed sky hue in [0, 255]")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Procedural landscape generator")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = ap.add_subparsers()

    ap_exp = sub.add_parser("export", help="Render one frame to a PNG")
    add_scene_args(ap_exp)
    ap_exp.add_argument("--out", default="landscape.png", help="PNG path")
    ap_exp.set_defaults(func=cmd_export)

    ap_desc = sub.add_parser("describe", help="Print scene parameters and draw order")
    add_scene_args(ap_desc)
    ap_desc.set_defaults(func=cmd_describe)

    ap_show = sub.add_parser("show", help="Open a resizable window")
    add_scene_args(ap_show)
    ap_show.add_argument("--fps", type=int, default=None)
    ap_show.set_defaults(func=cmd_show)

    args = ap.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(levelname)s %(name)s: %(message)s")
    if not hasattr(args, "func"):
        ap.print_help()
        return 0
    try:
        args.func(args)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
