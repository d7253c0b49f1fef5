import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

def bar_plot(labels, values, title, xlabel, ylabel, path, colors=None):
    fig = plt.figure()
    plt.bar(labels, values, color=colors)
    plt.title(title)
    plt.xlabel(xlabel)
    plt.ylabel(ylabel)
    fig.savefig(path, dpi=120, bbox_inches="tight")
    plt.close(fig)
