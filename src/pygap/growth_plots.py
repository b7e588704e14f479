"""
Visualization functions for ensemble trajectories and species composition.
"""
import matplotlib.pyplot as plt
import seaborn as sns

# Set default style
try:
    plt.style.use('seaborn-v0_8')
except OSError:
    try:
        plt.style.use('seaborn')
    except OSError:
        plt.style.use('default')

sns.set_palette("husl")


def plot_ensemble_trajectories(records_df, save_path=None):
    """Plot ensemble mean and spread of plot totals over time.

    Args:
        records_df: DataFrame from SimulationEngine.run() / records_to_dataframe()
        save_path: Optional path to save the plot
    """
    grouped = records_df.groupby('year')
    years = grouped.size().index.to_numpy()

    fig, axes = plt.subplots(3, 1, figsize=(10, 12), sharex=True)
    fig.suptitle('Forest Ensemble Trajectories', fontsize=14)

    panels = [
        ('trees', 'Live Trees per Plot'),
        ('weight', 'Plot Weight'),
        ('basal_area', 'Basal Area (cm²)'),
    ]
    for ax, (column, label) in zip(axes, panels):
        mean = grouped[column].mean().to_numpy()
        std = grouped[column].std(ddof=0).fillna(0.0).to_numpy()
        ax.plot(years, mean, label='Ensemble mean')
        ax.fill_between(years, mean - std, mean + std, alpha=0.3, label='±1 sd')
        ax.set_ylabel(label)
        ax.grid(True)
    axes[0].legend()
    axes[-1].set_xlabel('Simulation Year')

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=300, bbox_inches='tight')
    else:
        plt.show()

    plt.close(fig)


def plot_species_composition(records_df, catalog, save_path=None):
    """Plot the ensemble-mean weight of each species as a stacked area chart.

    Args:
        records_df: DataFrame from SimulationEngine.run() / records_to_dataframe()
        catalog: SpeciesCatalog used to produce the records
        save_path: Optional path to save the plot
    """
    columns = [f"{name}_weight" for name in catalog.names]
    means = records_df.groupby('year')[columns].mean()

    fig, ax = plt.subplots(figsize=(12, 6))
    ax.stackplot(means.index.to_numpy(), means.to_numpy().T, labels=catalog.names)
    ax.set_xlabel('Simulation Year')
    ax.set_ylabel('Mean Weight per Plot')
    ax.set_title('Species Composition')
    ax.legend(loc='upper left', bbox_to_anchor=(1.01, 1.0), fontsize='small')
    ax.grid(True)

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=300, bbox_inches='tight')
    else:
        plt.show()

    plt.close(fig)
