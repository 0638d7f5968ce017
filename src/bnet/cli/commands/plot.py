"""Plot sampling convergence from CSV."""

from pathlib import Path


def add_subparser(subparsers):
    parser = subparsers.add_parser("plot", help="Plot convergence from CSV")
    parser.add_argument("csv_file", help="Path to CSV file from sample --csv output")
    parser.add_argument("--output", "-o", help="Output PNG path (default: same as csv but .png)")
    parser.add_argument("--truth", type=float, help="Draw a reference line at the exact probability")
    parser.add_argument("--no-show", action="store_true", help="Don't display plot")
    parser.set_defaults(func=run_plot)


def run_plot(args):
    import matplotlib
    if args.no_show:
        matplotlib.use("Agg")
    import matplotlib.pyplot as plt
    import pandas as pd

    csv_path = Path(args.csv_file)
    if not csv_path.exists():
        print(f"File not found: {csv_path}")
        return

    df = pd.read_csv(csv_path)

    plt.figure(figsize=(10, 6))

    for col in df.columns[1:]:  # skip 'draw'
        plt.plot(df['draw'], df[col], label=col, marker='o', markersize=3)

    if args.truth is not None:
        plt.axhline(args.truth, color='gray', linestyle='--', label='exact')

    plt.xlabel('Samples')
    plt.ylabel('P(query = true)')
    plt.title(f'Sampling Convergence - {csv_path.stem}')
    plt.legend()
    plt.grid(True, alpha=0.3)
    plt.ylim(0, 1.05)

    out_path = args.output or str(csv_path.with_suffix('.png'))
    plt.savefig(out_path, dpi=150)
    print(f"Saved to {out_path}")

    if not args.no_show:
        plt.show()
