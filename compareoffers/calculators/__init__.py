from .earnings import calc_earnings, calc_royalties

__all__ = ["calc_earnings", "calc_royalties"]
