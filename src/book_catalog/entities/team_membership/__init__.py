"""Entity package: ad-hoc team membership.

The membership relation is stored once, as a set of (team, author) edges.
Both directions (a team's members, an author's teams) are read views over
that single edge set, so they can never disagree.
"""

from .entity import TeamMembership
from .repository import TeamMembershipRepository
from .table import TeamMembershipTable

__all__ = ["TeamMembership", "TeamMembershipRepository", "TeamMembershipTable"]
