"""
Governance - voting on GovernorAlpha proposals, directly or by signature.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional, Union

from . import eth
from .constants import abi
from .errors import ArgumentError, error_prefix
from .eth import CallOptions, TrxResponse
from .helpers import UINT256_MAX, contract_address, net_id, signer_address
from .signing import EIP712_DOMAIN_TYPE, Signature, sign, split_signature

if TYPE_CHECKING:
    from .client import Ucore


GOVERNOR_NAME = "Ucore Governor Alpha"

BALLOT_TYPE = [
    {"name": "proposalId", "type": "uint256"},
    {"name": "support", "type": "bool"},
]


def _check_vote(proposal_id: Any, support: Any, function_name: str) -> None:
    prefix = error_prefix(function_name)

    if not isinstance(proposal_id, int) or isinstance(proposal_id, bool) or not 0 <= proposal_id <= UINT256_MAX:
        raise ArgumentError(prefix + "Argument `proposal_id` must be a non-negative integer that fits in a uint256.")

    if not isinstance(support, bool):
        raise ArgumentError(prefix + "Argument `support` must be a boolean.")


def cast_vote(
    ucore: "Ucore",
    proposal_id: int,
    support: bool,
    options: Optional[CallOptions] = None,
) -> TrxResponse:
    """Vote for (``support=True``) or against a proposal."""
    network = net_id(ucore)
    _check_vote(proposal_id, support, "cast_vote")

    return eth.trx(
        contract_address(network.name, "GovernorAlpha"),
        "castVote",
        [proposal_id, support],
        abi=abi["GovernorAlpha"],
        provider=ucore._provider,
        options=options,
    )


def cast_vote_by_sig(
    ucore: "Ucore",
    proposal_id: int,
    support: bool,
    signature: Union[Signature, Mapping[str, Any]],
    options: Optional[CallOptions] = None,
) -> TrxResponse:
    """Submit a vote signed off-chain with ``create_vote_signature``."""
    network = net_id(ucore)
    _check_vote(proposal_id, support, "cast_vote_by_sig")

    try:
        v, r, s = split_signature(signature)
    except (KeyError, TypeError, ValueError) as exc:
        raise ArgumentError(
            error_prefix("cast_vote_by_sig")
            + "Argument `signature` must be an object that contains the v, r, and s pieces of an EIP-712 signature."
        ) from exc

    return eth.trx(
        contract_address(network.name, "GovernorAlpha"),
        "castVoteBySig",
        [proposal_id, support, v, r, s],
        abi=abi["GovernorAlpha"],
        provider=ucore._provider,
        options=options,
    )


def create_vote_signature(ucore: "Ucore", proposal_id: int, support: bool) -> Signature:
    """Sign a Ballot so someone else can submit the vote."""
    network = net_id(ucore)
    _check_vote(proposal_id, support, "create_vote_signature")
    signer_address(ucore, "create_vote_signature")

    domain = {
        "name": GOVERNOR_NAME,
        "chainId": network.id,
        "verifyingContract": contract_address(network.name, "GovernorAlpha"),
    }
    types = {
        "EIP712Domain": EIP712_DOMAIN_TYPE,
        "Ballot": BALLOT_TYPE,
    }
    message = {"proposalId": proposal_id, "support": support}

    return sign(domain, "Ballot", message, types, ucore._provider.account)
