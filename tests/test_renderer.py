"""
Tests for the character-cell renderer.

On an 80x24 screen the 30x15 field has its origin at row 5, column 25, so
the border spans columns 24..55 and rows 4..20.
"""

from termsnake.core.screen_interface import Style


class TestLayout:
    """Tests for centering and what gets painted."""

    def test_origin_centered(self):
        from termsnake.game.renderer import SnakeRenderer

        renderer = SnakeRenderer()

        assert renderer.get_field_size() == (30, 15)
        assert renderer.get_origin(80, 24) == (5, 25)
        assert renderer.get_origin(10, 4) == (-5, -10)
        assert SnakeRenderer(field_width=10, field_height=4).get_origin(80, 24) == (10, 35)

    def test_border_corners(self, game, fake_screen):
        from termsnake.game.renderer import SnakeRenderer

        SnakeRenderer().render(game.state, fake_screen)

        for corner in [(24, 4), (55, 4), (24, 20), (55, 20)]:
            assert fake_screen.cells[corner] == ("‖", Style.BORDER)
        # Inside the field is not border
        assert (25, 5) not in fake_screen.cells

    def test_snake_food_and_score(self, game, fake_screen):
        from termsnake.game.renderer import SnakeRenderer

        SnakeRenderer().render(game.state, fake_screen)

        for row in range(5, 10):
            assert fake_screen.cells[(25 + 3, 5 + row)] == ("█", Style.SNAKE)
        assert fake_screen.cells[(35, 15)] == ("●", Style.FOOD)
        assert fake_screen.text_at(24, 3, 8) == "Score: 0"
        assert fake_screen.cells[(24, 3)][1] is Style.TEXT

    def test_custom_border_glyph(self, game, fake_screen):
        from termsnake.game.renderer import SnakeRenderer

        SnakeRenderer(border_symbol="#").render(game.state, fake_screen)

        assert fake_screen.cells[(24, 4)] == ("#", Style.BORDER)

    def test_returns_painted_cells_and_flushes(self, game, fake_screen):
        from termsnake.game.renderer import SnakeRenderer

        painted = SnakeRenderer().render(game.state, fake_screen)

        assert painted == frozenset(fake_screen.cells)
        assert fake_screen.show_count == 1
        # 32*2 + 15*2 border cells, 5 segments, 1 food, 8 status glyphs
        assert len(painted) == 94 + 5 + 1 + 8


class TestDirtySet:
    """Tests for partial redraw."""

    def test_only_stale_cells_blanked(self, game, fake_screen):
        from termsnake.game.renderer import SnakeRenderer

        renderer = SnakeRenderer()
        first = renderer.render(game.state, fake_screen)
        game.step()
        fake_screen.set_calls.clear()

        second = renderer.render(game.state, fake_screen, first)

        blanks = [(x, y) for x, y, _, style in fake_screen.set_calls if style is Style.DEFAULT]
        assert blanks == [(28, 14)]
        assert fake_screen.cells[(28, 14)] == (" ", Style.DEFAULT)
        assert fake_screen.cells[(28, 9)] == ("█", Style.SNAKE)
        assert len(fake_screen.set_calls) == len(second) + 1

    def test_score_change_redrawn(self, game, fake_screen):
        from termsnake.game.geometry import Point
        from termsnake.game.renderer import SnakeRenderer

        renderer = SnakeRenderer()
        painted = renderer.render(game.state, fake_screen)
        game.state.food.point = Point(4, 3)
        game.step()

        renderer.render(game.state, fake_screen, painted)

        assert fake_screen.text_at(24, 3, 8) == "Score: 1"

    def test_resize_blanks_old_frame(self, game, make_screen):
        from termsnake.game.renderer import SnakeRenderer

        screen = make_screen(80, 24)
        renderer = SnakeRenderer()
        painted = renderer.render(game.state, screen)

        screen.width, screen.height = 60, 20
        screen.set_calls.clear()
        renderer.render(game.state, screen, painted)

        assert all(0 <= x < 60 and 0 <= y < 20 for x, y, _, _ in screen.set_calls)
        # Old top-left border corner is now stale and inside the smaller screen
        assert screen.cells[(24, 4)][0] == " "


class TestSmallScreens:
    """The field may not fit; nothing outside the surface is touched."""

    def test_tiny_screen_clips(self, game, make_screen):
        from termsnake.game.renderer import SnakeRenderer

        screen = make_screen(10, 5)
        renderer = SnakeRenderer()
        painted = renderer.render(game.state, screen)
        game.step()
        renderer.render(game.state, screen, painted)

        assert all(0 <= x < 10 and 0 <= y < 5 for x, y, _, _ in screen.set_calls)

    def test_zero_size_screen(self, game, make_screen):
        from termsnake.game.renderer import SnakeRenderer

        screen = make_screen(0, 0)
        renderer = SnakeRenderer()

        assert renderer.render(game.state, screen) == frozenset()
        renderer.render_game_over(game.state, screen)
        assert screen.set_calls == []


class TestGameOver:
    """Tests for the end-of-game summary."""

    def test_message_centered(self, game, fake_screen):
        from termsnake.game.renderer import SnakeRenderer

        game.state.score = 7
        SnakeRenderer().render_game_over(game.state, fake_screen)

        assert fake_screen.text_at(35, 12, 10) == "Game over!"
        assert fake_screen.text_at(33, 13, 15) == "Your score is 7"
        assert fake_screen.show_count == 1
