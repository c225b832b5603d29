import matplotlib.pyplot as plt
from scipy.stats import norm

from twisterkit import RandomTwister, normality_pvalue, swap
from twisterkit.plot import plot_samples

# Seeded generator: the same seed replays the same rolls
rng = RandomTwister(42)
rolls = [rng.uniform_int(1, 6) for _ in range(5)]
rng.reseed(42)
print("rolls:", rolls, "replayed:", [rng.uniform_int(1, 6) for _ in range(5)])

# Entropy-seeded generator; keep the seed to replay later
other = RandomTwister()
print("entropy seed:", other.seed)
print("probability:", other.uniform_probability())
print("real in [99, 100]:", other.uniform_real(99.0, 100.0))

# Ownership moves, it is never copied
owner = RandomTwister.moved_from(other)
print("moved-from owns engine:", other.owns_engine)
swap(owner, other)
print("after swap:", owner, other)

# Check and visualise a batch of normal draws
x = rng.normal_real(2.0, 0.5, size=10000)
print("KS p-value vs N(2, 0.5):", normality_pvalue(x, 2.0, 0.5))

ax = plot_samples(x, density=norm(loc=2.0, scale=0.5).pdf)
ax.set_title("normal_real(2.0, 0.5)")
plt.show()
