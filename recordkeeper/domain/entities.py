"""
Domain Entities
===============

Core records stored in keyed repositories.
Identity fields are frozen; mutable fields are validated on assignment.
"""

from typing import Optional
from datetime import datetime, date
from decimal import Decimal
from dataclasses import dataclass
from pydantic import BaseModel, Field, ConfigDict, computed_field

from .value_objects import BalancePolicy, Grade


class Transaction(BaseModel):
    """A single spending transaction"""
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Transaction identifier")
    date: datetime = Field(default_factory=datetime.now, description="Transaction timestamp")
    amount: Decimal = Field(..., gt=0, description="Amount to deduct")
    category: str = Field(..., description="Spending category")


@dataclass
class TransactionOutcome:
    """Result of applying a transaction to an account"""
    applied: bool
    amount: Decimal
    balance: Decimal


class Account(BaseModel):
    """Account whose balance policy is chosen at construction"""
    model_config = ConfigDict(validate_assignment=True)

    account_number: str = Field(..., frozen=True, description="Account number")
    balance: Decimal = Field(Decimal("0"), description="Current balance")
    policy: BalancePolicy = Field(BalancePolicy.STANDARD, frozen=True, description="Balance policy")

    @classmethod
    def savings(cls, account_number: str, initial_balance: Decimal) -> "Account":
        """Create an account that declines transactions exceeding its balance"""
        return cls(account_number=account_number, balance=initial_balance, policy=BalancePolicy.GUARDED)

    def apply_transaction(self, transaction: Transaction) -> TransactionOutcome:
        """Deduct the transaction amount if the policy allows it"""
        if not self.policy.allows(transaction.amount, self.balance):
            return TransactionOutcome(applied=False, amount=transaction.amount, balance=self.balance)

        self.balance = self.balance - transaction.amount
        return TransactionOutcome(applied=True, amount=transaction.amount, balance=self.balance)


class Client(BaseModel):
    """Client of the medical system"""
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Client identifier")
    full_name: str = Field(..., description="Full name")
    age: int = Field(..., ge=0, description="Age in years")
    gender: str = Field(..., description="Gender")

    def __str__(self):
        return f"Client [Id={self.id}, Name={self.full_name}, Age={self.age}, Gender={self.gender}]"


class MedicationOrder(BaseModel):
    """Prescription issued to a client"""
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Order identifier")
    client_id: int = Field(..., description="Owning client identifier")
    drug_name: str = Field(..., description="Prescribed drug")
    date_issued: datetime = Field(default_factory=datetime.now, description="Issue timestamp")

    def __str__(self):
        return (
            f"MedicationOrder [Id={self.id}, ClientId={self.client_id}, "
            f"Drug={self.drug_name}, DateIssued={self.date_issued:%Y-%m-%d}]"
        )


class InventoryItem(BaseModel):
    """Base class for stock kept in an inventory repository"""
    model_config = ConfigDict(validate_assignment=True)

    id: int = Field(..., frozen=True, description="Item identifier")
    name: str = Field(..., frozen=True, description="Item name")
    quantity: int = Field(0, ge=0, description="Units in stock")


class TechProduct(InventoryItem):
    """Electronic product with a warranty"""

    brand: str = Field(..., description="Manufacturer brand")
    warranty_months: int = Field(0, ge=0, description="Warranty length in months")

    def __str__(self):
        return (
            f"Electronic: {self.name} (ID: {self.id}, Brand: {self.brand}, "
            f"Warranty: {self.warranty_months} months, Qty: {self.quantity})"
        )


class FoodProduct(InventoryItem):
    """Grocery product with an expiry date"""

    expiry_date: date = Field(..., description="Expiry date")

    def __str__(self):
        return f"Grocery: {self.name} (ID: {self.id}, Expires: {self.expiry_date:%Y-%m-%d}, Qty: {self.quantity})"


class Learner(BaseModel):
    """Learner with an exam score"""

    id: int = Field(..., description="Learner identifier")
    full_name: str = Field(..., description="Full name")
    score: int = Field(..., description="Exam score")

    @computed_field
    @property
    def grade(self) -> Grade:
        """Letter grade for the score"""
        return Grade.from_score(self.score)

    def report_line(self) -> str:
        return f"{self.full_name} (ID: {self.id}): Score = {self.score}, Grade = {self.grade.value}"


class StockItem(BaseModel):
    """Logged stock entry, persisted with PascalCase keys"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(..., alias="Id", description="Item identifier")
    name: str = Field(..., alias="Name", description="Item name")
    quantity: int = Field(..., ge=0, alias="Quantity", description="Units in stock")
    date_added: datetime = Field(default_factory=datetime.now, alias="DateAdded", description="Logging timestamp")

    def display(self, date_format: Optional[str] = None) -> str:
        added = self.date_added.strftime(date_format or "%Y-%m-%d")
        return f"{self.id}: {self.name} - Qty: {self.quantity} (Added: {added})"
