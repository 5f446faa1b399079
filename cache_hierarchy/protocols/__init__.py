from .policies import InclusionPolicy, InclusivePolicy, NonInclusivePolicy, inclusion_policy_for

__all__ = ["InclusionPolicy", "InclusivePolicy", "NonInclusivePolicy", "inclusion_policy_for"]
