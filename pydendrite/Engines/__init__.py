from .Kobayashi import Kobayashi
