"""Art, upload, and hologram commands."""

from __future__ import annotations

from collections.abc import Mapping

from ascii_oracle.core.commands import FlagValue
from ascii_oracle.core.dispatcher import CommandContext
from ascii_oracle.core.registry import CommandRegistry
from ascii_oracle.core.types import (
    UPLOAD_KINDS,
    AsciiResult,
    CommandResult,
    ErrorResult,
    HologramSpec,
    InfoResult,
    PowerUp,
    usage_error,
)

NOT_FOUND_SAMPLE_SIZE = 10
DEFAULT_HOLOGRAM = "cube"
DEFAULT_HOLOGRAM_TEXT = "HELLO"

# shape -> label shown when entering 3D mode
HOLOGRAM_SHAPES: dict[str, str] = {
    "cube": "CUBE",
    "sphere": "SPHERE",
    "torus": "TORUS",
    "pyramid": "PYRAMID",
    "dna": "DNA HELIX",
    "galaxy": "GALAXY",
    "wave": "WAVE",
    "text": "3D TEXT",
    "particles": "PARTICLES",
    "icosahedron": "ICOSAHEDRON",
    "illuminati": "ILLUMINATI PYRAMID",
    "eye": "ILLUMINATI PYRAMID",
    "allseeingeye": "ILLUMINATI PYRAMID",
    "sacred": "MERKABA",
    "geometry": "MERKABA",
    "sacredgeometry": "MERKABA",
    "metatron": "METATRON'S CUBE",
    "flower": "FLOWER OF LIFE",
    "floweroflife": "FLOWER OF LIFE",
    "tesseract": "4D TESSERACT",
    "hypercube": "4D TESSERACT",
}


def register_art_commands(registry: CommandRegistry) -> None:
    @registry.register(
        name="draw",
        short_description="Display ASCII art",
        usage="draw <name> [--list|-l]",
        detail="\n".join(
            [
                "Examples:",
                "  draw cat          Show cat art",
                "  draw mario        Show Mario art",
                "  draw --list       List all available art",
            ]
        ),
    )
    def draw(args: tuple[str, ...], flags: Mapping[str, FlagValue], ctx: CommandContext) -> CommandResult:
        art = ctx.services.art
        if flags.get("list") or flags.get("l"):
            names = art.list_art_names()
            return InfoResult(output=(f"Available ASCII art ({len(names)}):", "", ", ".join(names)))

        if not args:
            return usage_error("draw <name>", "Example: draw cat", 'Use "draw --list" to see all available art.')

        name = args[0].lower()
        lines = art.lookup_art(name)
        if lines is None:
            sample = ", ".join(art.list_art_names()[:NOT_FOUND_SAMPLE_SIZE])
            return ErrorResult(
                output=(
                    f'Art "{name}" not found.',
                    "",
                    f"Available: {sample}...",
                    "",
                    'Use "draw --list" for full list.',
                )
            )

        return AsciiResult(
            output="\n".join(lines),
            art_name=name,
            power_up=PowerUp("star", f"Drew {name}!"),
        )

    @registry.register(
        name="upload",
        short_description="Convert an image or video to ASCII",
        usage="upload <image|video>",
        detail="Opens a file picker for the chosen media type.",
    )
    def upload(args: tuple[str, ...], _flags: Mapping[str, FlagValue], _ctx: CommandContext) -> CommandResult:
        kind = args[0].lower() if args else ""
        if kind == "image":
            return InfoResult(output=f"Opening {kind} picker... Select a file to convert to ASCII.", trigger_upload="image")
        if kind == "video":
            return InfoResult(output=f"Opening {kind} picker... Select a file to convert to ASCII.", trigger_upload="video")
        return usage_error(" | ".join(f"upload {item}" for item in UPLOAD_KINDS))

    @registry.register(
        name="hologram",
        short_description="3D visualization",
        usage="hologram <type> [text...]",
        detail="\n".join(
            [
                "Basic shapes: cube, sphere, torus, pyramid, dna, galaxy, wave, text <msg>, particles, icosahedron",
                "Sacred geometry: illuminati, sacred, metatron, flower, tesseract",
                'Press ESC or type "exit" to return.',
            ]
        ),
    )
    def hologram(args: tuple[str, ...], _flags: Mapping[str, FlagValue], ctx: CommandContext) -> CommandResult:
        shape = args[0].lower() if args else DEFAULT_HOLOGRAM
        label = HOLOGRAM_SHAPES.get(shape)
        if label is None:
            return ErrorResult(
                output=(f"Invalid hologram type: {shape}", "", f"Available: {', '.join(HOLOGRAM_SHAPES)}")
            )

        text = " ".join(args[1:]) or DEFAULT_HOLOGRAM_TEXT
        # The host must already be in 3D mode when it renders the next frame.
        ctx.surface.enter_hologram(HologramSpec(type=shape, text=text))
        return InfoResult(
            output=(f"Entering 3D mode: {label}", 'Press ESC or type "exit" to return.'),
            power_up=PowerUp("mushroom", "3D Mode Activated!"),
        )
