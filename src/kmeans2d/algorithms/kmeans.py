"""
K-means clustering estimator.

Wraps the partition loop in a fit/predict interface.
"""

from typing import Optional, List, Dict, Any, Sequence, Union
import warnings
import torch

from ..base.interfaces import Observation
from ..base.data_structures import Centroid, PartitionState
from ..assignments.hard import HardAssignment
from ..updates.mean import MeanUpdater
from ..initialization.random import RandomInit
from ..utils.convergence import CentroidsUnchanged
from ..utils.metrics import inertia
from ..utils.validation import as_observations, check_observations
from ..exceptions import InvalidArgumentError
from .partition import lloyd


class KMeans:
    """K-means clustering of 2D observations.

    Partitions observations into K clusters with Lloyd's algorithm,
    stopping once an update round leaves every centroid in place.

    Parameters
    ----------
    n_clusters : int
        Number of clusters
    init : str or sequence, default='random'
        Initialization method:
        - 'random' : Sample n_clusters distinct observations
        - sequence of n_clusters observations or (x, y) pairs : Use as
          initial centroids (copied, never modified)
    max_iter : int, default=100
        Maximum number of iterations
    verbose : int, default=0
        Verbosity level
    random_state : int or torch.Generator, optional
        Random seed for reproducible initialization
    device : torch.device, optional
        Device for batched distance computation

    Attributes
    ----------
    cluster_centers_ : list of Centroid
        Final centroids
    clusters_ : list of list
        Observations of each cluster, in input order
    labels_ : list of int
        Cluster index of each training observation
    n_iter_ : int
        Number of iterations run
    converged_ : bool
        Whether an update round without centroid movement was reached
    history_ : list of PartitionState
        Per-iteration record
    """

    def __init__(self,
                 n_clusters: int,
                 init: Union[str, Sequence] = 'random',
                 max_iter: int = 100,
                 verbose: int = 0,
                 random_state: Optional[Union[int, torch.Generator]] = None,
                 device: Optional[torch.device] = None):
        """Initialize K-means algorithm."""
        self.n_clusters = n_clusters
        self.init = init
        self.max_iter = max_iter
        self.verbose = verbose
        self.random_state = random_state
        self.device = device if device is not None else torch.device('cpu')

        # These are created on fit
        self.assignment_strategy: Optional[HardAssignment] = None
        self.update_strategy: Optional[MeanUpdater] = None
        self.convergence_criterion: Optional[CentroidsUnchanged] = None

        self.fitted_ = False
        self.n_iter_ = 0
        self.converged_ = False
        self.history_: List[PartitionState] = []
        self.cluster_centers_: Optional[List[Centroid]] = None
        self.clusters_: Optional[List[List[Observation]]] = None
        self.labels_: Optional[List[int]] = None

    def _create_components(self) -> None:
        """Create the assignment, update and convergence components."""
        self.assignment_strategy = HardAssignment(self.device)
        self.update_strategy = MeanUpdater()
        self.convergence_criterion = CentroidsUnchanged()

    def _initial_centroids(self, observations: List[Observation]) -> List[Observation]:
        if isinstance(self.init, str):
            if self.init == 'random':
                return RandomInit(self.random_state).initialize(observations, self.n_clusters)
            raise ValueError(f"Unknown init method: {self.init}")

        centroids = [Centroid.from_observation(c) for c in as_observations(self.init)]
        if len(centroids) != self.n_clusters:
            raise InvalidArgumentError(f"Expected {self.n_clusters} initial centroids, "
                                       f"got {len(centroids)}")
        return centroids

    def fit(self, X, y=None) -> 'KMeans':
        """Fit K-means clustering.

        Parameters
        ----------
        X : sequence of observations, or array-like of shape (n_samples, 2)
            Training data
        y : Ignored
            Not used, present for API consistency

        Returns
        -------
        self : KMeans
            Fitted estimator
        """
        observations = as_observations(X)
        check_observations(observations)

        self._create_components()

        if self.verbose:
            print(f"Initializing {self.n_clusters} clusters...")

        centroids = self._initial_centroids(observations)

        clusters, history, converged = lloyd(
            observations,
            centroids,
            self.max_iter,
            assignment_strategy=self.assignment_strategy,
            update_strategy=self.update_strategy,
            convergence_criterion=self.convergence_criterion,
            verbose=self.verbose
        )

        if self.verbose and not converged:
            warnings.warn(f"Failed to converge after {self.max_iter} iterations")

        label_of = {}
        for k, cluster in enumerate(clusters):
            for p in cluster:
                label_of[id(p)] = k

        # Slots of empty clusters can still hold sampled input objects
        self.cluster_centers_ = [Centroid.from_observation(c) for c in centroids]
        self.clusters_ = clusters
        self.labels_ = [label_of[id(p)] for p in observations]
        self.history_ = history
        self.n_iter_ = len(history)
        self.converged_ = converged
        self.fitted_ = True
        return self

    def fit_predict(self, X, y=None) -> List[int]:
        """Fit and return labels of the training observations."""
        self.fit(X, y)
        return self.labels_

    def predict(self, X) -> List[int]:
        """Predict cluster labels for new data.

        Parameters
        ----------
        X : sequence of observations, or array-like of shape (n_samples, 2)
            New data to predict

        Returns
        -------
        labels : list of int
            Index of the nearest fitted centroid for each observation
        """
        if not self.fitted_:
            raise RuntimeError("Model must be fitted before calling predict")

        observations = as_observations(X)
        return self.assignment_strategy.compute_assignments(observations, self.cluster_centers_)

    def score(self, X, y=None) -> float:
        """Opposite of the value of X on the K-means objective."""
        observations = as_observations(X)
        labels = self.predict(observations)

        clusters = [[] for _ in range(len(self.cluster_centers_))]
        for p, k in zip(observations, labels):
            clusters[k].append(p)

        return -inertia(clusters, self.cluster_centers_)

    @property
    def inertia_(self) -> float:
        """Sum of squared distances of training observations to their centroid."""
        if not self.fitted_:
            raise RuntimeError("Model must be fitted first")
        return inertia(self.clusters_, self.cluster_centers_)

    def get_params(self, deep: bool = True) -> Dict[str, Any]:
        """Get parameters (sklearn compatibility)."""
        return {
            'n_clusters': self.n_clusters,
            'init': self.init,
            'max_iter': self.max_iter,
            'verbose': self.verbose,
            'random_state': self.random_state,
            'device': self.device
        }

    def set_params(self, **params) -> 'KMeans':
        """Set parameters (sklearn compatibility)."""
        for key, value in params.items():
            setattr(self, key, value)
        return self
