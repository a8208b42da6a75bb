#!/usr/bin/env python3
"""
EOS Endpoint Health Visualization
Generates charts from scripts/check_endpoints.py output
"""

import json
import matplotlib.pyplot as plt
import numpy as np
from pathlib import Path

# Configuration
COLORS = {
    'ok': '#00D4AA',
    'transport': '#FF6B6B',
    'endpoint_unsupported': '#F7931A',
    'semantic': '#9945FF',
    'accent': '#4ECDC4',
    'dark': '#1a1a2e',
    'light': '#eaeaea'
}

plt.style.use('dark_background')
plt.rcParams['figure.facecolor'] = COLORS['dark']
plt.rcParams['axes.facecolor'] = '#16213e'
plt.rcParams['axes.edgecolor'] = COLORS['light']
plt.rcParams['text.color'] = COLORS['light']
plt.rcParams['axes.labelcolor'] = COLORS['light']
plt.rcParams['xtick.color'] = COLORS['light']
plt.rcParams['ytick.color'] = COLORS['light']
plt.rcParams['font.size'] = 12
plt.rcParams['axes.titlesize'] = 16
plt.rcParams['axes.labelsize'] = 14

REPORT_PATH = Path('endpoint_report.json')
OUTPUT_DIR = Path('datagraphics')


def load_report():
    """Load endpoint probe results from JSON"""
    with open(REPORT_PATH, 'r') as f:
        return json.load(f)


def short_name(url):
    return url.split('://', 1)[-1]


def plot_latency(report, method='get_info'):
    """Horizontal bar chart: latency per endpoint, colored by outcome"""
    rows = []
    for item in report:
        for probe in item['probes']:
            if probe['method'] == method:
                rows.append((item['endpoint'], item['pool'], probe))
    rows.sort(key=lambda row: row[2]['latency_ms'])

    fig, ax = plt.subplots(figsize=(12, max(4, len(rows) * 0.45)))

    names = [f"{short_name(url)}{' (bad)' if pool == 'known_bad' else ''}" for url, pool, _ in rows]
    values = [probe['latency_ms'] for _, _, probe in rows]
    colors = [COLORS.get(probe['status'], COLORS['accent']) for _, _, probe in rows]

    bars = ax.barh(names, values, color=colors, edgecolor='white', linewidth=1)

    for bar, (_, _, probe) in zip(bars, rows):
        ax.text(bar.get_width() + max(values) * 0.01, bar.get_y() + bar.get_height() / 2,
                f"{probe['latency_ms']:.0f} ms  {probe['status']}", va='center', fontsize=10)

    ok_latencies = [probe['latency_ms'] for _, _, probe in rows if probe['status'] == 'ok']
    if ok_latencies:
        median_latency = np.median(ok_latencies)
        ax.axvline(median_latency, color=COLORS['accent'], linestyle='--', linewidth=2,
                   label=f'Median (ok): {median_latency:.0f} ms')
        ax.legend(loc='lower right')

    ax.set_xlabel('Latency (ms)')
    ax.set_title(f'{method} latency per endpoint', fontsize=18, fontweight='bold')
    ax.set_xlim(0, max(values) * 1.35)
    ax.grid(axis='x', alpha=0.3)

    plt.tight_layout()
    plt.savefig(OUTPUT_DIR / f'latency_{method}.png', dpi=150, bbox_inches='tight')
    plt.close()
    print(f'✓ latency_{method}.png')


def plot_status_breakdown(report):
    """Stacked bar chart: outcome classification per RPC method"""
    methods = sorted({probe['method'] for item in report for probe in item['probes']})
    statuses = ['ok', 'transport', 'endpoint_unsupported', 'semantic']

    counts = np.zeros((len(statuses), len(methods)))
    for item in report:
        for probe in item['probes']:
            if probe['status'] in statuses:
                counts[statuses.index(probe['status']), methods.index(probe['method'])] += 1

    fig, ax = plt.subplots(figsize=(10, 6))

    bottom = np.zeros(len(methods))
    for i, status in enumerate(statuses):
        ax.bar(methods, counts[i], bottom=bottom, color=COLORS[status], edgecolor='white', label=status)
        bottom += counts[i]

    ax.set_ylabel('Endpoints')
    ax.set_title('Probe outcomes by method', fontsize=18, fontweight='bold')
    ax.legend()
    ax.grid(axis='y', alpha=0.3)

    plt.tight_layout()
    plt.savefig(OUTPUT_DIR / 'status_breakdown.png', dpi=150, bbox_inches='tight')
    plt.close()
    print('✓ status_breakdown.png')


def main():
    print('\nEOS Endpoint Health Visualization\n')
    print('=' * 40)

    report = load_report()
    print(f'Found {len(report)} probed endpoints\n')

    OUTPUT_DIR.mkdir(exist_ok=True)

    plot_latency(report, 'get_info')
    plot_latency(report, 'get_key_accounts')
    plot_status_breakdown(report)

    print('\n' + '=' * 40)
    print(f'✓ All visualizations saved to {OUTPUT_DIR}/\n')


if __name__ == '__main__':
    main()
