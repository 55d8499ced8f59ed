"""
Compatibility matcher - find, score and explain counterpart listings.
"""
import logging
from typing import Iterable, Optional, TypeVar, Union

from ..config import get_config
from ..models.listing import Listing, ListingLike, ListingType, to_listing
from ..models.matching import MatchResult, MatchScore
from .classifier import listing_kind


logger = logging.getLogger(__name__)

BASE_SCORE = 100
SECTION_BONUS = 50
ZONE_BONUS = 25
REASON_SEPARATOR = " • "
FALLBACK_REASON = "Compatible match"

Scored = TypeVar("Scored", bound=Union[MatchScore, MatchResult])


def accepts(
    have_zone: str,
    have_section: str,
    want_zones: list[str],
    want_sections: list[str],
) -> bool:
    """
    Check whether a held seat satisfies a wanted profile.

    An empty want list accepts anything for that dimension; zone and section
    are checked independently.
    """
    zone_match = not want_zones or have_zone in want_zones
    section_match = not want_sections or have_section in want_sections
    return zone_match and section_match


def _first(values: list[str]) -> Optional[str]:
    return values[0] if values else None


def sort_by_score(items: list[Scored]) -> list[Scored]:
    """Sort by score descending, keeping input order for equal scores."""
    decorated = [(-item.score, index, item) for index, item in enumerate(items)]
    decorated.sort(key=lambda entry: (entry[0], entry[1]))
    return [item for _, _, item in decorated]


class CompatibilityMatcher:
    """
    Matches a subject listing against a pool of candidates.

    Eligibility depends on the HAVE/WANT pair:
    - HAVE/HAVE: each side's seat must be accepted by the other's wants
    - WANT/HAVE and HAVE/WANT: the seat must be accepted by the wanting side
    - WANT/WANT: never
    """

    def __init__(self, large_pool_warning: Optional[int] = None):
        if large_pool_warning is None:
            large_pool_warning = get_config().matching.large_pool_warning
        self.large_pool_warning = large_pool_warning

    def find_matches(
        self,
        subject: ListingLike,
        pool: Iterable[ListingLike],
    ) -> list[MatchScore]:
        """
        Find eligible counterparts for a listing.

        Args:
            subject: The listing to match for
            pool: Candidate listings, typically every active listing

        Returns:
            MatchScore list, highest score first, pool order kept on ties
        """
        candidates = [to_listing(candidate) for candidate in pool]
        self._check_pool_size(candidates)
        return self._match(to_listing(subject), candidates)

    def find_matches_for_user(
        self,
        my_listings: Iterable[ListingLike],
        pool: Iterable[ListingLike],
    ) -> list[MatchResult]:
        """
        Match every active listing a user owns against the pool.

        Args:
            my_listings: The requesting user's listings
            pool: Candidate listings

        Returns:
            MatchResult list across all of the user's listings, highest score first
        """
        candidates = [to_listing(candidate) for candidate in pool]
        self._check_pool_size(candidates)

        by_id: dict[Optional[str], Listing] = {}
        for candidate in candidates:
            by_id.setdefault(candidate.id, candidate)

        results = []
        subjects = [to_listing(listing) for listing in my_listings]
        for subject in subjects:
            if not subject.is_active:
                continue

            for match in self._match(subject, candidates):
                matched = by_id.get(match.listing_id)
                if matched is None:
                    continue
                results.append(MatchResult(
                    my_listing=subject,
                    matched_listing=matched,
                    score=match.score,
                    reason=match.reason,
                ))

        logger.info(
            f"Found {len(results)} matches for {len(subjects)} listings "
            f"across a pool of {len(candidates)}"
        )
        return sort_by_score(results)

    def _check_pool_size(self, candidates: list[Listing]) -> None:
        if len(candidates) > self.large_pool_warning:
            logger.warning(
                f"Matching against {len(candidates)} listings; "
                f"pre-filter the pool by game date to keep this bounded"
            )

    def _match(self, subject: Listing, candidates: list[Listing]) -> list[MatchScore]:
        subject_kind = listing_kind(subject)
        matches = []

        for candidate in candidates:
            if candidate.id == subject.id:
                continue

            if subject.owner_id and candidate.owner_id == subject.owner_id:
                continue

            if subject.game_date is None or candidate.game_date != subject.game_date:
                continue

            if not candidate.is_active:
                continue

            match = self._evaluate(subject, subject_kind, candidate, listing_kind(candidate))
            if match is not None:
                matches.append(match)

        logger.debug(f"Listing {subject.id}: {len(matches)} of {len(candidates)} candidates match")
        return sort_by_score(matches)

    def _evaluate(
        self,
        subject: Listing,
        subject_kind: Optional[ListingType],
        candidate: Listing,
        candidate_kind: Optional[ListingType],
    ) -> Optional[MatchScore]:
        """Score one candidate, or return None when the pair is not eligible."""
        if subject_kind == ListingType.HAVE and candidate_kind == ListingType.HAVE:
            return self._score_swap(subject, candidate)

        if subject_kind == ListingType.WANT and candidate_kind == ListingType.HAVE:
            if not accepts(
                candidate.have_zone,
                candidate.have_section,
                subject.want_zones,
                subject.want_sections,
            ):
                return None
            score, section_hit, zone_hit = self._score_request(want=subject, have=candidate)
            if section_hit:
                reason = f"They have Section {candidate.have_section} that you want"
            elif zone_hit:
                reason = f"They have {candidate.have_zone} tickets"
            else:
                reason = FALLBACK_REASON
            return MatchScore(listing_id=candidate.id, score=score, reason=reason)

        if subject_kind == ListingType.HAVE and candidate_kind == ListingType.WANT:
            if not accepts(
                subject.have_zone,
                subject.have_section,
                candidate.want_zones,
                candidate.want_sections,
            ):
                return None
            score, section_hit, zone_hit = self._score_request(want=candidate, have=subject)
            if section_hit:
                reason = f"They want Section {subject.have_section} that you have"
            elif zone_hit:
                reason = f"They want {subject.have_zone} tickets"
            else:
                reason = FALLBACK_REASON
            return MatchScore(listing_id=candidate.id, score=score, reason=reason)

        # WANT/WANT, or a side that neither has tickets nor wants any
        return None

    def _score_swap(self, subject: Listing, candidate: Listing) -> Optional[MatchScore]:
        """HAVE/HAVE: both seats must be acceptable to the other side."""
        subject_accepted = accepts(
            subject.have_zone,
            subject.have_section,
            candidate.want_zones,
            candidate.want_sections,
        )
        candidate_accepted = accepts(
            candidate.have_zone,
            candidate.have_section,
            subject.want_zones,
            subject.want_sections,
        )
        if not (subject_accepted and candidate_accepted):
            return None

        score = BASE_SCORE
        reasons = []

        # Only the first wanted section counts as an exact match
        exact_section = (
            subject.have_section == _first(candidate.want_sections)
            and candidate.have_section == _first(subject.want_sections)
        )
        if exact_section:
            score += SECTION_BONUS
            reasons.append("Exact section match")

        mutual_zone = (
            candidate.have_zone in subject.want_zones
            and subject.have_zone in candidate.want_zones
        )
        if mutual_zone:
            score += ZONE_BONUS

        # The reason only needs the subject to want the candidate's zone
        if candidate.have_zone in subject.want_zones:
            reasons.append(f"Your want matches their {candidate.have_zone}")

        reason = REASON_SEPARATOR.join(reasons) if reasons else FALLBACK_REASON
        return MatchScore(listing_id=candidate.id, score=score, reason=reason)

    def _score_request(self, want: Listing, have: Listing) -> tuple[int, bool, bool]:
        """Score a one-directional request; returns (score, section_hit, zone_hit)."""
        section_hit = have.have_section in want.want_sections
        zone_hit = have.have_zone in want.want_zones

        score = BASE_SCORE
        if section_hit:
            score += SECTION_BONUS
        if zone_hit:
            score += ZONE_BONUS
        return score, section_hit, zone_hit


def find_matches(subject: ListingLike, pool: Iterable[ListingLike]) -> list[MatchScore]:
    """Find, score and rank counterparts for one listing."""
    return CompatibilityMatcher().find_matches(subject, pool)


def find_matches_for_user(
    my_listings: Iterable[ListingLike],
    pool: Iterable[ListingLike],
) -> list[MatchResult]:
    """Find matches for every active listing a user owns, ranked together."""
    return CompatibilityMatcher().find_matches_for_user(my_listings, pool)
