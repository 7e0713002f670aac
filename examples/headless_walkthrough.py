"""Drive a radial menu without a window and print its state."""

from __future__ import annotations

from pathlib import Path

from skillring.radial import build_menu, load_config

FRAME = 1.0 / 60.0


def run(scene, seconds: float) -> None:
    for _ in range(int(round(seconds / FRAME))):
        scene.update(FRAME)


def report(scene, title: str) -> None:
    controller = scene.controller
    print(f"-- {title}")
    print(f"   open={controller.is_window_open} alpha={scene.window.alpha:.2f} "
          f"rotation={scene.menu_root.local_rotation:.1f} label={scene.label.text!r}")
    for index, slot in enumerate(scene.slots):
        button = slot.button
        x, y = button.anchored_position
        print(f"   [{index}] {slot.name:<6} active={button.active!s:<5} "
              f"scale={button.local_scale:.2f} pos=({x:7.1f}, {y:7.1f})")


def main():
    config = load_config(Path(__file__).with_name("skills.json"))
    scene = build_menu(config)
    controller = scene.controller
    controller.on_skill_changed += lambda index: print(f"   skill changed -> {index}")

    report(scene, "collapsed")

    controller.toggle_window()
    run(scene, 0.1)
    report(scene, "opening, half way")
    controller.toggle_window()
    run(scene, 0.5)
    report(scene, "closed again mid-open")

    controller.on_click(3)
    run(scene, 1.0)
    report(scene, "clicked slot 3")

    controller.close_window()
    run(scene, 0.5)
    controller.open_window()
    run(scene, 0.5)
    report(scene, "reopened, rotation restored")


if __name__ == "__main__":
    main()
