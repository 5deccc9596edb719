from .Integration import GQL
