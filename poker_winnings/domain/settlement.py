"""Settlement of net balances into pairwise transfers."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal

from .balance import DomainValidationError, PlayerBalance, UnbalancedInput, to_decimal

DEFAULT_EPSILON = Decimal("0.000001")


@dataclass(frozen=True)
class Transfer:
    payer: str
    payee: str
    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount <= 0:
            raise DomainValidationError("transfer amount must be positive")
        if self.payer == self.payee:
            raise DomainValidationError("payer and payee must differ")


BalancesInput = Iterable[PlayerBalance] | Iterable[tuple[str, object]] | Mapping[str, object]


def coerce_balances(balances: BalancesInput) -> list[PlayerBalance]:
    items = balances.items() if isinstance(balances, Mapping) else balances
    result: list[PlayerBalance] = []
    seen: set[str] = set()
    for item in items:
        if isinstance(item, PlayerBalance):
            entry = item
        else:
            identifier, amount = item
            entry = PlayerBalance(identifier=identifier, net_balance=to_decimal(amount))
        if entry.identifier in seen:
            raise DomainValidationError(f"duplicate player: {entry.identifier}")
        seen.add(entry.identifier)
        result.append(entry)
    return result


def _match(
    entries: list[list],
    transfers: list[Transfer],
    epsilon: Decimal,
    dust: list[list],
) -> list[list]:
    """Walk the sorted heads, returning whatever is still unsettled.

    A head within ``epsilon`` of zero is taken off the list; a non-zero
    remainder goes to ``dust`` so it can still be paid later.
    """
    debtors = sorted((item for item in entries if item[1] < 0), key=lambda item: item[1])
    creditors = sorted((item for item in entries if item[1] > 0), key=lambda item: item[1], reverse=True)

    debtor_idx = 0
    creditor_idx = 0
    while debtor_idx < len(debtors) and creditor_idx < len(creditors):
        debtor = debtors[debtor_idx]
        creditor = creditors[creditor_idx]

        amount = min(-debtor[1], creditor[1])
        transfers.append(Transfer(payer=debtor[0], payee=creditor[0], amount=amount))

        debtor[1] += amount
        creditor[1] -= amount

        if abs(debtor[1]) <= epsilon:
            if debtor[1]:
                dust.append(debtor)
            debtor_idx += 1
        if abs(creditor[1]) <= epsilon:
            if creditor[1]:
                dust.append(creditor)
            creditor_idx += 1

    return debtors[debtor_idx:] + creditors[creditor_idx:]


def build_transfers(balances: BalancesInput, epsilon: Decimal = DEFAULT_EPSILON) -> list[Transfer]:
    """Greedily match the largest debtor against the largest creditor.

    Each round settles at least one side completely, so a run with ``N``
    non-zero balances emits at most ``N - 1`` transfers. Sorting is stable:
    equal balances keep their input order, which keeps the output reproducible.

    Balances within ``epsilon`` of zero count as settled. They are only paid
    when the larger balances leave something over, in which case everything
    still open is matched again with exact zero checks.
    """
    entries = coerce_balances(balances)

    significant: list[list] = []
    dust: list[list] = []
    for entry in entries:
        if abs(entry.net_balance) > epsilon:
            significant.append([entry.identifier, entry.net_balance])
        elif entry.net_balance:
            dust.append([entry.identifier, entry.net_balance])

    transfers: list[Transfer] = []
    leftover = _match(significant, transfers, epsilon, dust)
    if leftover:
        leftover = _match(leftover + dust, transfers, Decimal(0), [])
    else:
        leftover = dust

    residue = sum((item[1] for item in leftover), Decimal(0))
    if abs(residue) > epsilon:
        raise UnbalancedInput(residue)

    return transfers


def settlement_deltas(transfers: Iterable[Transfer]) -> dict[str, Decimal]:
    """Net effect of transfers per player: received minus paid."""
    deltas: dict[str, Decimal] = {}
    for transfer in transfers:
        deltas[transfer.payer] = deltas.get(transfer.payer, Decimal(0)) - transfer.amount
        deltas[transfer.payee] = deltas.get(transfer.payee, Decimal(0)) + transfer.amount
    return deltas
