"""
Tests for Plotting1D.
"""

import numpy as np
import pytest

ROOT = pytest.importorskip("ROOT")

from drawn import AUTO, Plotting1D


class TestStyling:
    """Tests for automatic and explicit styling of added objects."""

    def test_auto_styles_advance_per_histogram(self, simple_hist, gaussian_hist):
        plotter = Plotting1D()
        plotter.new_hist(simple_hist, "first")
        plotter.new_hist(gaussian_hist, "second")

        assert simple_hist.GetMarkerStyle() == 20
        assert simple_hist.GetMarkerColor() == ROOT.kBlue + 1
        assert gaussian_hist.GetMarkerStyle() == 21
        assert gaussian_hist.GetLineColor() == ROOT.kRed + 1
        assert plotter.counter == 2

    def test_explicit_style_and_color(self, simple_hist):
        plotter = Plotting1D()
        plotter.new_hist(simple_hist, style=2, color=ROOT.kMagenta, size=3, opt="hist")

        assert simple_hist.GetMarkerStyle() == 2
        assert simple_hist.GetLineStyle() == 2
        assert simple_hist.GetLineColor() == ROOT.kMagenta
        assert simple_hist.GetLineWidth() == 3
        assert plotter.counter == 1

    def test_marker_drawing_keeps_solid_line(self, simple_hist):
        Plotting1D().new_hist(simple_hist, style=24, opt="p")
        assert simple_hist.GetLineStyle() == 1

    def test_line_option_is_drawn_as_hist(self, simple_hist):
        plotter = Plotting1D()
        plotter.new_hist(simple_hist, opt="l")
        assert plotter.hists[0]['option'] == "l hist"

    def test_function_takes_auto_line_style(self, simple_hist):
        plotter = Plotting1D()
        plotter.new_hist(simple_hist)
        func = ROOT.TF1("f_styled", "x", 0, 4)
        plotter.new_func(func, "line")

        assert func.GetLineStyle() == 7
        assert func.GetLineColor() == ROOT.kRed + 1

    def test_graph_styles(self):
        graph = ROOT.TGraph(3, np.array([1., 2., 3.]), np.array([1., 4., 9.]))
        plotter = Plotting1D()
        plotter.new_graph(graph, "points", style=AUTO, opt="pl")

        assert graph.GetMarkerStyle() == 20
        assert graph.GetMarkerColor() == ROOT.kBlue + 1
        assert graph.GetLineStyle() == 1


class TestInputChecks:
    """Tests for rejected inputs."""

    def test_none_histogram(self):
        with pytest.raises(ValueError, match="None"):
            Plotting1D().new_hist(None)

    def test_2d_histogram_rejected(self, gaussian_hist2d):
        with pytest.raises(TypeError):
            Plotting1D().new_hist(gaussian_hist2d)

    def test_histogram_as_function_rejected(self, simple_hist):
        with pytest.raises(TypeError):
            Plotting1D().new_func(simple_hist)

    def test_plot_without_objects(self, tmp_path):
        with pytest.raises(ValueError, match="No histograms"):
            Plotting1D().plot(str(tmp_path / "empty_1d.pdf"))


class TestAxisRanges:
    """Tests for automatic and user axis ranges."""

    def test_automatic_linear_range(self, simple_hist, tmp_path):
        plotter = Plotting1D()
        plotter.new_hist(simple_hist, "h")
        plotter.plot(str(tmp_path / "auto_linear.pdf"))

        xaxis = plotter.axis_hist.GetXaxis()
        yaxis = plotter.axis_hist.GetYaxis()
        assert (xaxis.GetXmin(), xaxis.GetXmax()) == pytest.approx((0, 4))
        assert (yaxis.GetXmin(), yaxis.GetXmax()) == pytest.approx((0, 4.3))

    def test_partial_user_range(self, simple_hist, tmp_path):
        plotter = Plotting1D()
        plotter.new_hist(simple_hist)
        plotter.set_axis_range(ylow=1)
        plotter.plot(str(tmp_path / "partial_range.pdf"))

        yaxis = plotter.axis_hist.GetYaxis()
        assert (yaxis.GetXmin(), yaxis.GetXmax()) == pytest.approx((1, 4.3))
        assert plotter.axis_config['ranges']['y'] == (1, None)

    def test_log_range_skips_empty_bins(self, hist_with_empty_bin, tmp_path):
        plotter = Plotting1D()
        plotter.new_hist(hist_with_empty_bin)
        plotter.plot(str(tmp_path / "log_range.pdf"), logy=True)

        yaxis = plotter.axis_hist.GetYaxis()
        assert (yaxis.GetXmin(), yaxis.GetXmax()) == pytest.approx((1, 16))
        assert plotter.canvas.GetLogy() == 1

    def test_graph_range_covers_points(self, tmp_path):
        graph = ROOT.TGraph(3, np.array([1., 2., 3.]), np.array([1., 4., 9.]))
        plotter = Plotting1D()
        plotter.new_graph(graph)
        plotter.plot(str(tmp_path / "graph_range.pdf"))

        xaxis = plotter.axis_hist.GetXaxis()
        yaxis = plotter.axis_hist.GetYaxis()
        assert xaxis.GetXmin() <= 1 and xaxis.GetXmax() >= 3
        assert yaxis.GetXmax() > 9

    def test_graph_log_range_uses_positive_points(self, tmp_path):
        graph = ROOT.TGraph(3, np.array([1., 2., 3.]), np.array([0., 4., 9.]))
        plotter = Plotting1D()
        plotter.new_graph(graph)
        plotter.plot(str(tmp_path / "graph_log_range.pdf"), logy=True)

        yaxis = plotter.axis_hist.GetYaxis()
        assert yaxis.GetXmin() == pytest.approx(2)
        assert yaxis.GetXmax() >= 18

    def test_functions_only(self, tmp_path, capsys):
        plotter = Plotting1D()
        plotter.new_func(ROOT.TF1("f_only", "x*x", 0, 2), "x^{2}")
        plotter.plot(str(tmp_path / "functions_only.pdf"))

        assert "Warning: Only functions" in capsys.readouterr().out
        xaxis = plotter.axis_hist.GetXaxis()
        assert (xaxis.GetXmin(), xaxis.GetXmax()) == pytest.approx((0, 2))


class TestAnnotations:
    """Tests for text, lines and the legend."""

    def test_latex_lines(self):
        plotter = Plotting1D()
        lines = plotter.draw_latex(0.2, 0.8, "ALICE;pp 13 TeV", line_spacing=0.05)

        assert [latex.GetTitle() for latex in lines] == ["ALICE", "pp 13 TeV"]
        assert lines[0].GetY() == pytest.approx(0.8)
        assert lines[1].GetY() == pytest.approx(0.75)
        assert plotter.latex == lines

    def test_curly_line(self):
        plotter = Plotting1D()
        line = plotter.new_line(0, 0, 1, 1, style=-2)

        assert isinstance(line, ROOT.TCurlyLine)
        assert line.GetWaveLength() == pytest.approx(0.04)
        assert plotter.lines == []

    def test_straight_line(self):
        plotter = Plotting1D()
        line = plotter.new_line(0, 1, 4, 1, style=2, color=ROOT.kGray, label="unity")

        assert isinstance(line, ROOT.TLine)
        assert line.GetLineStyle() == 2
        assert plotter.lines[0]['label'] == "unity"

    def test_legend_holds_labelled_entries_only(self, simple_hist, gaussian_hist, tmp_path):
        plotter = Plotting1D()
        plotter.new_hist(simple_hist, "labelled")
        plotter.new_hist(gaussian_hist)
        plotter.new_func(ROOT.TF1("f_legend", "1", 0, 4), "constant")
        plotter.new_line(0, 1, 4, 1, label="unity")
        plotter.plot(str(tmp_path / "legend_entries.pdf"))

        assert plotter.legend.GetListOfPrimitives().GetSize() == 3

    def test_legend_configuration(self, simple_hist, tmp_path):
        plotter = Plotting1D()
        plotter.new_hist(simple_hist, "h")
        plotter.set_legend(0.6, 0.9, 0.5, 0.7)
        plotter.set_canvas_config(text_size=0.05)
        plotter.plot(str(tmp_path / "legend_config.pdf"))

        assert plotter.legend.GetX1NDC() == pytest.approx(0.6)
        assert plotter.legend.GetY2NDC() == pytest.approx(0.7)
        assert plotter.legend.GetTextSize() == pytest.approx(0.05)


class TestOutput:
    """Tests for the saved files and canvas settings."""

    def test_pdf_written(self, gaussian_hist, tmp_path):
        output = tmp_path / "sub" / "gauss.pdf"
        plotter = Plotting1D(verbose=True)
        plotter.new_hist(gaussian_hist, "Gauss", opt="hist")
        plotter.set_axis_label("x", "Entries", 1.2, 1.4)
        canvas = plotter.plot(str(output))

        assert output.exists()
        assert canvas.GetName().startswith("can_gauss_")
        assert plotter.axis_hist.GetName() == f"{canvas.GetName()}_axis"
        assert plotter.axis_hist.GetXaxis().GetTitle() == "x"
        assert plotter.axis_hist.GetYaxis().GetTitleOffset() == pytest.approx(1.4)

    def test_root_file_written(self, simple_hist, tmp_path):
        output = tmp_path / "canvas_store.root"
        plotter = Plotting1D()
        plotter.new_hist(simple_hist)
        plotter.plot(str(output))

        assert output.exists()

    def test_margins(self, simple_hist, tmp_path):
        plotter = Plotting1D()
        plotter.new_hist(simple_hist)
        plotter.set_margins(low=0.15, left=0.12, up=0.05, right=0.03, width=800, height=600)
        canvas = plotter.plot(str(tmp_path / "margins.pdf"))

        assert canvas.GetBottomMargin() == pytest.approx(0.15)
        assert canvas.GetLeftMargin() == pytest.approx(0.12)
        assert canvas.GetRightMargin() == pytest.approx(0.03)
        assert plotter.get_canvas_config()['width'] == 800
        assert plotter.get_canvas_config()['height'] == 600


class TestCanvasLifetime:
    """Canvases of earlier plots stay usable after later plots."""

    def test_same_output_stem_in_two_plotters(self, simple_hist, gaussian_hist, tmp_path):
        first = Plotting1D()
        first.new_hist(simple_hist, "first")
        second = Plotting1D()
        second.new_hist(gaussian_hist, "second")

        first_canvas = first.plot(str(tmp_path / "shared.pdf"))
        second_canvas = second.plot(str(tmp_path / "other" / "shared.pdf"))

        assert first.canvas.GetName().startswith("can_shared_")
        assert first_canvas.GetName() != second_canvas.GetName()
        assert first.axis_hist.GetName() != second.axis_hist.GetName()
        assert first.legend.GetListOfPrimitives().GetSize() == 1

    def test_same_plot_in_two_formats(self, simple_hist, tmp_path):
        plotter = Plotting1D()
        plotter.new_hist(simple_hist, "h")

        pdf_canvas = plotter.plot(str(tmp_path / "twice.pdf"))
        root_canvas = plotter.plot(str(tmp_path / "twice.root"))

        assert pdf_canvas.GetName() != root_canvas.GetName()
        assert pdf_canvas.GetLeftMargin() == pytest.approx(0.1)
        assert plotter.canvas is root_canvas
        assert (tmp_path / "twice.pdf").exists()
        assert (tmp_path / "twice.root").exists()
