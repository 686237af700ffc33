"""Custom errors for the collateral and mint engine"""

class ProtocolError(Exception):
    """Base error class for protocol errors"""
    pass

class ArithmeticError(ProtocolError):
    """Error for arithmetic overflow/underflow"""
    pass

class InvalidPriceError(ProtocolError):
    """Error for invalid price data"""
    pass

class InvalidAmountError(ProtocolError):
    """Error for malformed or non-positive amounts"""
    pass

class InvalidConfigError(ProtocolError):
    """Error for out of range engine configuration"""
    pass

class InsufficientCollateralError(ProtocolError):
    """Mint would push debt value above the max loan-to-value"""
    pass

class ExcessiveBurnError(ProtocolError):
    """Burn amount exceeds current debt"""
    pass

class CollateralLockedError(ProtocolError):
    """Withdrawal would leave too little collateral to back the debt"""
    pass

class InsufficientBalanceError(ProtocolError):
    """Transfer, allowance or redemption shortfall"""
    pass

class UnauthorizedError(ProtocolError):
    """Caller lacks the role required for the call"""
    pass

class ReentrancyError(ProtocolError):
    """Engine was re-entered while an operation was in flight"""
    pass
