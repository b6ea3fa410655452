import argparse
import random
import sys
from core.vector import Vector3
from core.utils import random_double, random_vector
from camera.camera import Camera
from geometry.world import HittableList
from geometry.sphere import Sphere
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.presets import MetalPresets, DielectricPresets, ColorPresets
from renderer.raytracer import Renderer
from renderer.scheduler import DEFAULT_CHUNK_SIZE, RenderError
from renderer.output import save_image

# Image width, samples per pixel and bounce depth per quality level
QUALITY_LEVELS = {
    "preview": {"width": 320, "samples": 4, "bounces": 8},
    "low": {"width": 640, "samples": 16, "bounces": 20},
    "medium": {"width": 1280, "samples": 32, "bounces": 50},
    "high": {"width": 1920, "samples": 64, "bounces": 50},
}

# Camera defaults per scene
SCENE_VIEWS = {
    "final": {"vfov": 20.0, "lookfrom": (13.0, 2.0, 3.0), "lookat": (0.0, 0.0, 0.0),
              "defocus_angle": 0.6, "focus_dist": 10.0},
    "simple": {"vfov": 20.0, "lookfrom": (-2.0, 2.0, 1.0), "lookat": (0.0, 0.0, -1.0),
               "defocus_angle": 10.0, "focus_dist": 3.4},
}

def create_final_scene(rng=random, verbose: bool = True) -> HittableList:
    """
    Ground plane, a grid of small random spheres and three large ones.
    """
    world = HittableList()
    world.add(Sphere(Vector3(0, -1000, 0), 1000, ColorPresets.matte(ColorPresets.GRAY)))

    ref_point = Vector3(4, 0.2, 0)
    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())

            # Keep the space around the big metal sphere clear
            if (center - ref_point).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                albedo = random_vector(rng) * random_vector(rng)
                material = Lambertian(albedo)
            elif choose_mat < 0.95:
                material = Metal(random_vector(rng, 0.5, 1.0), random_double(rng, 0.0, 0.5))
            else:
                material = DielectricPresets.glass()
            world.add(Sphere(center, 0.2, material))

    world.add(Sphere(Vector3(0, 1, 0), 1.0, DielectricPresets.glass()))
    world.add(Sphere(Vector3(-4, 1, 0), 1.0, ColorPresets.matte(ColorPresets.BROWN)))
    world.add(Sphere(Vector3(4, 1, 0), 1.0, MetalPresets.bronze_mirror()))

    if verbose:
        print("\n=== Creating World ===")
        print(f"Added {len(world) - 4} small spheres around three large ones")
    return world

def create_simple_scene(verbose: bool = True) -> HittableList:
    """
    Three spheres on a large ground sphere: matte, hollow glass and metal.
    """
    world = HittableList()
    world.add(Sphere(Vector3(0, -100.5, -1), 100, ColorPresets.matte(ColorPresets.OLIVE)))
    world.add(Sphere(Vector3(0, 0, -1.2), 0.5, ColorPresets.matte(ColorPresets.BLUE)))
    world.add(Sphere(Vector3(-1, 0, -1), 0.5, DielectricPresets.glass()))
    world.add(Sphere(Vector3(-1, 0, -1), 0.4, DielectricPresets.air_bubble()))
    world.add(Sphere(Vector3(1, 0, -1), 0.5, MetalPresets.brushed_metal()))

    if verbose:
        print("\n=== Creating World ===")
        print(f"Added {len(world)} spheres")
    return world

def build_camera(args) -> Camera:
    quality = QUALITY_LEVELS[args.quality]
    view = SCENE_VIEWS[args.scene]

    def pick(value, default):
        return default if value is None else value

    return Camera(
        aspect_ratio=args.aspect_ratio,
        image_width=pick(args.width, quality["width"]),
        samples_per_pixel=pick(args.samples, quality["samples"]),
        max_depth=pick(args.max_depth, quality["bounces"]),
        vfov=pick(args.vfov, view["vfov"]),
        lookfrom=Vector3(*pick(args.lookfrom, view["lookfrom"])),
        lookat=Vector3(*pick(args.lookat, view["lookat"])),
        vup=Vector3(*args.vup),
        defocus_angle=pick(args.defocus_angle, view["defocus_angle"]),
        focus_dist=pick(args.focus_dist, view["focus_dist"]),
    )

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="CPU path tracer for sphere scenes")
    parser.add_argument("-o", "--output", default="image.ppm",
                        help="Output file; .ppm is written as ASCII P3, other extensions via Pillow")
    parser.add_argument("--scene", choices=sorted(SCENE_VIEWS), default="final")
    parser.add_argument("--quality", choices=list(QUALITY_LEVELS), default="preview")
    parser.add_argument("--width", type=int, help="Image width in pixels")
    parser.add_argument("--samples", type=int, help="Samples per pixel")
    parser.add_argument("--max-depth", type=int, help="Maximum ray bounces")
    parser.add_argument("--aspect-ratio", type=float, default=16.0 / 9.0)
    parser.add_argument("--vfov", type=float, help="Vertical field of view in degrees")
    parser.add_argument("--lookfrom", type=float, nargs=3, metavar=("X", "Y", "Z"))
    parser.add_argument("--lookat", type=float, nargs=3, metavar=("X", "Y", "Z"))
    parser.add_argument("--vup", type=float, nargs=3, metavar=("X", "Y", "Z"), default=(0.0, 1.0, 0.0))
    parser.add_argument("--defocus-angle", type=float, help="Aperture cone angle in degrees")
    parser.add_argument("--focus-dist", type=float, help="Distance to the plane of perfect focus")
    parser.add_argument("--workers", type=int, help="Worker threads (default: CPU count)")
    parser.add_argument("--chunk-size", type=int, default=DEFAULT_CHUNK_SIZE, help="Pixels per work item")
    parser.add_argument("--seed", type=int, help="Seed scene generation and per-pixel sampling")
    parser.add_argument("-q", "--quiet", action="store_true", help="Suppress progress output")
    return parser.parse_args(argv)

def main(argv=None) -> int:
    args = parse_args(argv)
    verbose = not args.quiet

    try:
        camera = build_camera(args)
        if args.scene == "final":
            scene_rng = random.Random(args.seed) if args.seed is not None else random
            world = create_final_scene(scene_rng, verbose=verbose)
        else:
            world = create_simple_scene(verbose=verbose)
        renderer = Renderer(camera, world, chunk_size=args.chunk_size,
                            workers=args.workers, seed=args.seed, verbose=verbose)
        pixels = renderer.render()
        save_image(args.output, renderer.width, renderer.height, pixels)
    except (ValueError, RenderError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if verbose:
        print(f"Wrote {args.output}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
