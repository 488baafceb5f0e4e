"""Pytest configuration and shared fixtures."""

import base64
import os
from pathlib import Path

import matplotlib
matplotlib.use("Agg")

import pytest

from vector_signal_generator.objects.config import SignalConfig
from vector_signal_generator.objects.params import AppParams
from vector_signal_generator.objects.enums import ModulationType, MultitonePhase
from vector_signal_generator.simulation.generator import SignalGenerator


@pytest.fixture
def generator():
    """Create a fresh signal generator."""
    return SignalGenerator()


@pytest.fixture
def cw_config():
    """100 Hz CW carrier sampled at 1 kHz (10 samples per cycle)."""
    return SignalConfig(
        carrier_frequency_hz=100.0,
        sample_rate_hz=1000.0,
        modulation=ModulationType.CW,
    )


@pytest.fixture
def am_config():
    """1 kHz carrier, 100 Hz tone, 50% AM at 10 kHz."""
    return SignalConfig(
        carrier_frequency_hz=1000.0,
        sample_rate_hz=10e3,
        modulation=ModulationType.AM,
        modulation_frequency_hz=100.0,
        modulation_strength=0.5,
    )


@pytest.fixture
def fm_config():
    """1 kHz carrier, 100 Hz tone, 500 Hz deviation at 100 kHz."""
    return SignalConfig(
        carrier_frequency_hz=1000.0,
        sample_rate_hz=100e3,
        modulation=ModulationType.FM,
        modulation_frequency_hz=100.0,
        modulation_strength=500.0,
    )


@pytest.fixture
def pm_config():
    """1 kHz carrier, 100 Hz tone, beta = 1 rad at 100 kHz."""
    return SignalConfig(
        carrier_frequency_hz=1000.0,
        sample_rate_hz=100e3,
        modulation=ModulationType.PM,
        modulation_frequency_hz=100.0,
        modulation_strength=1.0,
    )


@pytest.fixture
def pulse_config():
    """100 Hz pulse train, 30% duty cycle at 100 kHz (1000 samples per period)."""
    return SignalConfig(
        carrier_frequency_hz=1000.0,
        sample_rate_hz=100e3,
        modulation=ModulationType.PULSE,
        modulation_frequency_hz=100.0,
        modulation_strength=0.3,
    )


@pytest.fixture
def multitone_config():
    """Eight random-phase tones 1 kHz apart around a 10 kHz carrier."""
    return SignalConfig(
        carrier_frequency_hz=10e3,
        sample_rate_hz=100e3,
        modulation=ModulationType.MULTITONE,
        tone_count=8,
        tone_spacing_hz=1e3,
        initial_phase=MultitonePhase.RANDOM,
        seed=42,
    )


@pytest.fixture(params=[
    ModulationType.CW,
    ModulationType.AM,
    ModulationType.FM,
    ModulationType.PM,
    ModulationType.PULSE,
    ModulationType.MULTITONE,
])
def any_config(request):
    """One configuration per modulation kind."""
    return SignalConfig(
        carrier_frequency_hz=2000.0,
        sample_rate_hz=48e3,
        modulation=request.param,
        modulation_frequency_hz=150.0,
        modulation_strength=0.4,
        tone_count=5,
        tone_spacing_hz=250.0,
        initial_phase=MultitonePhase.SCHROEDER,
    )


@pytest.fixture
def default_params():
    """Default application parameters."""
    return AppParams()


# ============================================================================
# pytest-html hooks for attaching plots to HTML reports
# ============================================================================

@pytest.fixture(scope='session')
def report_dir(request):
    """
    Plot directory next to the HTML report, or None without --html.

    Layout:
        <html report dir>/
        <html report dir>/plots/
    """
    html_path = request.config.getoption('--html', default=None)
    if html_path is None:
        return None

    report_base = Path(html_path).parent
    plots_dir = report_base / 'plots'
    plots_dir.mkdir(parents=True, exist_ok=True)
    request.config._plots_dir = plots_dir
    return plots_dir


@pytest.fixture
def plots_dir(report_dir, tmp_path):
    """Directory tests save plots into (report plots dir or a temp dir)."""
    if report_dir is None:
        return tmp_path
    return report_dir


@pytest.hookimpl(optionalhook=True)
def pytest_html_report_title(report):
    """Set custom title for HTML report."""
    report.title = "Vector Signal Generator - Test Report"


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Embed plots attached with ``attach_plot`` into the HTML report."""
    outcome = yield
    report = outcome.get_result()

    if report.when != 'call':
        return
    if item.config.getoption('--html', default=None) is None:
        return

    for name, plot_path in item.user_properties:
        if name != 'plot' or not os.path.exists(plot_path):
            continue
        with open(plot_path, 'rb') as f:
            encoded = base64.b64encode(f.read()).decode('utf-8')
        extra = {
            'name': os.path.basename(plot_path),
            'content': f'<img src="data:image/png;base64,{encoded}" style="max-width: 100%;"/>',
            'format_type': 'html',
            'extension': 'html',
        }
        report.extra = getattr(report, 'extra', [])
        report.extra.append(extra)


@pytest.fixture
def attach_plot(request):
    """
    Attach a saved plot to the current test report.

    Usage in tests:
        def test_something(attach_plot, plots_dir):
            fig.savefig(plots_dir / 'my_plot.png')
            attach_plot(plots_dir / 'my_plot.png')
    """
    def _attach(plot_path):
        request.node.user_properties.append(('plot', str(plot_path)))

    return _attach
