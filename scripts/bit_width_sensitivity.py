"""Bit-width sensitivity sweep for the example ECG filter.

Runs the 11-tap example FIR over a seeded synthetic ECG at every
combination of data and coefficient word size and prints SNR/MSE, so
the narrowest word sizes that still preserve fidelity can be read off.

Usage:
    python scripts/bit_width_sensitivity.py
"""

import logging

import numpy as np
import pandas as pd
from tqdm import tqdm

import fpga_dsp as dsp

#configuration
SIGNAL_TYPE = "ECG"
SEED = 7
DATA_BIT_WIDTHS = [8, 10, 12, 14, 16, 20, 24]
COEFF_BIT_WIDTHS = [6, 8, 10, 12, 16]
SNR_LOSS_DB = 0.1  #tolerated drop from the widest configuration

logger = logging.getLogger("bit_width_sensitivity")


def main():
    logging.basicConfig(level=logging.INFO)
    clean, noisy = dsp.generate_signal(SIGNAL_TYPE, seed=SEED)

    float_reference = np.convolve(noisy, dsp.EXAMPLE_FIR_COEFFS)[: len(noisy)]
    reference_snr = dsp.calculate_snr(clean, float_reference)
    logger.info("floating-point reference SNR: %.2f dB", reference_snr)

    frames = []
    for data_bits in tqdm(DATA_BIT_WIDTHS, desc="data widths"):
        frames.append(
            dsp.bit_width_sweep(clean, noisy, dsp.EXAMPLE_FIR_COEFFS, [data_bits], COEFF_BIT_WIDTHS)
        )
    results = pd.concat(frames, ignore_index=True)

    #reporting
    print("\n--- BIT-WIDTH SENSITIVITY ---")
    print(f"{'Data bits':<10} | {'Coeff bits':<10} | {'SNR (dB)':<10} | {'MSE':<12}")
    print("-" * 50)
    for row in results.itertuples(index=False):
        print(f"{row.data_bit_width:<10d} | {row.coeff_bit_width:<10d} | {row.snr:<10.2f} | {row.mse:<12.3e}")

    acceptable = results[results["snr"] >= reference_snr - SNR_LOSS_DB]
    if acceptable.empty:
        print("\nno configuration within tolerance of the floating-point reference")
        return
    cheapest = acceptable.assign(
        total_bits=acceptable["data_bit_width"] + acceptable["coeff_bit_width"]
    ).sort_values(["total_bits", "data_bit_width"]).iloc[0]
    print(
        f"\nnarrowest within {SNR_LOSS_DB} dB of float: "
        f"{int(cheapest.data_bit_width)}-bit data / {int(cheapest.coeff_bit_width)}-bit coefficients "
        f"(SNR {cheapest.snr:.2f} dB)"
    )


if __name__ == "__main__":
    main()
