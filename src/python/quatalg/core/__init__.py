from quatalg.core.quaternion import Quaternion

__all__ = ['Quaternion']
