"""
Use case base classes.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar

InputDTO = TypeVar('InputDTO')
OutputDTO = TypeVar('OutputDTO')


@dataclass
class UseCaseResult(Generic[OutputDTO]):
    """
    Output of a use case.

    Failures are raised as domain exceptions and rendered by the API
    exception handler, so a result always carries data.
    """
    data: OutputDTO

    @classmethod
    def ok(cls, data: OutputDTO) -> 'UseCaseResult[OutputDTO]':
        return cls(data=data)


class UseCase(ABC, Generic[InputDTO, OutputDTO]):
    """One application operation, run through ``execute``."""

    @abstractmethod
    def execute(self, input_dto: InputDTO) -> UseCaseResult[OutputDTO]:
        pass
