"""
Bridge between observation sequences and torch tensors.
"""

from typing import Optional, Sequence
import torch
from torch import Tensor

from ..base.interfaces import Observation


def observations_to_tensor(observations: Sequence[Observation],
                           device: Optional[torch.device] = None) -> Tensor:
    """Stack observation coordinates into an (n, 2) float64 tensor.

    Args:
        observations: Sequence of observations
        device: Target device (CPU if None)

    Returns:
        (n, 2) tensor where row i is (observations[i].x, observations[i].y)
    """
    if device is None:
        device = torch.device('cpu')

    if len(observations) == 0:
        return torch.zeros(0, 2, dtype=torch.float64, device=device)

    return torch.tensor(
        [[p.x, p.y] for p in observations],
        dtype=torch.float64,
        device=device
    )
