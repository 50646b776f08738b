from polyfill.config import COLOR_PALETTE, AppConfig, palette_color


def test_defaults():
    cfg = AppConfig()
    assert (cfg.window_width, cfg.window_height) == (1000, 700)
    assert (cfg.drawing_area_width, cfg.drawing_area_height) == (800, 700)
    assert cfg.fill_color == (0.0, 0.5, 1.0)
    assert cfg.line_thickness == 2.0
    assert cfg.extrusion_depth == 50.0
    assert cfg.log_level == "WARNING"


def test_palette_has_sixteen_colors():
    assert len(COLOR_PALETTE) == 16
    assert COLOR_PALETTE[12] == (0, 128, 255)


def test_palette_color_is_normalized():
    assert palette_color(12) == (0.0, 128 / 255.0, 1.0)
    assert palette_color(3) == (1.0, 1.0, 1.0)
    assert all(0.0 <= c <= 1.0 for i in range(16) for c in palette_color(i))


def test_from_env():
    cfg = AppConfig.from_env({
        "POLYFILL_WIDTH": "640",
        "POLYFILL_HEIGHT": "480",
        "POLYFILL_LOG_LEVEL": "debug",
    })
    assert cfg.drawing_area_width == 440
    assert cfg.drawing_area_height == 480
    assert cfg.log_level == "DEBUG"


def test_from_env_ignores_invalid_values():
    cfg = AppConfig.from_env({"POLYFILL_WIDTH": "wide", "POLYFILL_HEIGHT": ""})
    assert cfg.window_width == 1000
    assert cfg.window_height == 700


def test_negative_dimensions_become_zero():
    cfg = AppConfig(window_width=-10, right_panel_width=200)
    assert cfg.window_width == 0
    assert cfg.drawing_area_width == 0
