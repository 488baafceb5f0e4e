"""Command line front-end for the vector signal generator.

Builds a parameter set (optionally loaded from JSON), generates one block of
IQ samples, and saves parameters, exports samples and renders plots on
request.
"""

import argparse
import logging
from typing import List, Optional

import attrs

from .objects.enums import ModulationType, MultitonePhase, SpectrumScale, TimeDomainUnit
from .objects.params import AppParams, load_params_or_keep
from .simulation.export import export_bin, export_csv
from .simulation.iq import generate_iq

# AppParams fields that hold the modulating frequency / strength of each kind
MOD_FREQ_FIELDS = {
    ModulationType.AM: 'am_mod_freq_hz',
    ModulationType.FM: 'fm_mod_freq_hz',
    ModulationType.PM: 'pm_mod_freq_hz',
    ModulationType.PULSE: 'pulse_freq_hz',
}
MOD_STRENGTH_FIELDS = {
    ModulationType.AM: 'am_mod_index',
    ModulationType.FM: 'fm_deviation_hz',
    ModulationType.PM: 'pm_mod_index',
    ModulationType.PULSE: 'pulse_duty_cycle',
}


def _enum_choices(enum_cls) -> List[str]:
    return [member.value for member in enum_cls]


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog='ivsg',
        description='Vector Signal Generator - CW/AM/FM/PM/Pulse/Multitone I/Q synthesis',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 1 kHz AM carrier, 100 Hz tone, 50% index, plotted
  ivsg --modulation AM --mod-freq 100 --mod-strength 0.5 --plot am.png

  # 16-tone Schroeder multitone exported as float32 pairs
  ivsg --modulation Multitone --tones 16 --spacing 500 --phase Schroeder --bin tones.bin

  # Reuse and update a saved parameter file
  ivsg --params params.json --frequency 2000 --save-params params.json
        """
    )

    parser.add_argument('--params', type=str, default=None,
                        help='Load parameters from a JSON file')
    parser.add_argument('--save-params', type=str, default=None,
                        help='Save the final parameters to a JSON file')

    # Common parameters
    parser.add_argument('--modulation', choices=_enum_choices(ModulationType),
                        help='Modulation type')
    parser.add_argument('--frequency', type=float,
                        help='Carrier frequency in Hz')
    parser.add_argument('--sample-rate', type=float,
                        help='Sample rate in Hz')
    parser.add_argument('--num-samples', type=int,
                        help='Number of samples to generate')
    parser.add_argument('--amplitude', type=float,
                        help='Output amplitude factor')

    # Modulation parameters (apply to the selected modulation)
    parser.add_argument('--mod-freq', type=float,
                        help='Modulating frequency (AM/FM/PM) or pulse frequency in Hz')
    parser.add_argument('--mod-strength', type=float,
                        help='AM index, FM deviation (Hz), PM index (rad) or pulse duty cycle')

    # Multitone parameters
    parser.add_argument('--tones', type=int,
                        help='Number of multitone components')
    parser.add_argument('--spacing', type=float,
                        help='Multitone spacing in Hz')
    parser.add_argument('--phase', choices=_enum_choices(MultitonePhase),
                        help='Multitone initial phase schedule')
    parser.add_argument('--seed', type=int,
                        help='Seed for random multitone phases')

    # Display options
    parser.add_argument('--scale', choices=_enum_choices(SpectrumScale),
                        help='Spectrum magnitude scale')
    parser.add_argument('--time-unit', choices=_enum_choices(TimeDomainUnit),
                        help='Time-domain axis unit')

    # Outputs
    parser.add_argument('--csv', type=str, default=None,
                        help='Export samples as two-column CSV')
    parser.add_argument('--bin', type=str, default=None,
                        help='Export samples as interleaved little-endian float32')
    parser.add_argument('--plot', type=str, default=None,
                        help='Save time-domain and spectrum plots to an image file')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')

    return parser


def apply_overrides(params: AppParams, args: argparse.Namespace) -> AppParams:
    """
    Return a copy of ``params`` with the command line overrides applied.

    Modulation frequency and strength overrides land in the fields of the
    selected modulation; they are ignored for CW and Multitone.

    Raises
    ------
    ValueError
        If an override is out of range
    """
    changes = {}
    if args.modulation is not None:
        changes['modulation'] = ModulationType(args.modulation)
    if args.frequency is not None:
        changes['carrier_frequency_hz'] = args.frequency
    if args.sample_rate is not None:
        changes['sample_rate_hz'] = args.sample_rate
    if args.num_samples is not None:
        changes['num_samples'] = args.num_samples
    if args.amplitude is not None:
        changes['amplitude'] = args.amplitude
    if args.tones is not None:
        changes['multitone_count'] = args.tones
    if args.spacing is not None:
        changes['multitone_spacing_hz'] = args.spacing
    if args.phase is not None:
        changes['multitone_phase'] = MultitonePhase(args.phase)
    if args.seed is not None:
        changes['seed'] = args.seed
    if args.scale is not None:
        changes['spectrum_scale'] = SpectrumScale(args.scale)
    if args.time_unit is not None:
        changes['time_domain_unit'] = TimeDomainUnit(args.time_unit)

    modulation = changes.get('modulation', params.modulation)
    if args.mod_freq is not None and modulation in MOD_FREQ_FIELDS:
        changes[MOD_FREQ_FIELDS[modulation]] = args.mod_freq
    if args.mod_strength is not None and modulation in MOD_STRENGTH_FIELDS:
        changes[MOD_STRENGTH_FIELDS[modulation]] = args.mod_strength

    return attrs.evolve(params, **changes)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``ivsg`` command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    params = AppParams()
    if args.params:
        print(f"Loading parameters from {args.params}...")
        params = load_params_or_keep(args.params, params)

    try:
        params = apply_overrides(params, args)
        config = params.to_config()
    except ValueError as e:
        print(f"Error: {e}")
        return 2

    if args.plot and not (params.show_time_domain or params.show_freq_domain):
        print("Error: --plot needs show_time_domain or show_freq_domain enabled")
        return 2

    print(f"Signal: {config}")
    iq_data, iq_meta = generate_iq(config, params.num_samples, params.amplitude)
    print(f"\n{iq_meta}\n")

    if args.save_params:
        AppParams.to_file(params, args.save_params)
        print(f"Parameters saved to {args.save_params}")
    if args.csv:
        export_csv(args.csv, iq_data)
        print(f"Exported to {args.csv}")
    if args.bin:
        export_bin(args.bin, iq_data)
        print(f"Exported to {args.bin}")
    if args.plot:
        from .visualization import save_signal_plot
        save_signal_plot(args.plot, iq_data, params)
        print(f"Plot saved as '{args.plot}'")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
