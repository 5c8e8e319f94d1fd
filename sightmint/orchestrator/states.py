from typing import Literal

PipelineState = Literal[
    "awaiting_capture",
    "ready_to_classify",
    "classifying",
    "minting",
    "succeeded",
    "failed",
]

AWAITING_CAPTURE = "awaiting_capture"
READY_TO_CLASSIFY = "ready_to_classify"
CLASSIFYING = "classifying"
MINTING = "minting"
SUCCEEDED = "succeeded"
FAILED = "failed"

# Allowed moves:
# awaiting_capture -> ready_to_classify          (capture / import ok)
# ready_to_classify -> classifying               (user confirms)
# classifying -> minting | failed                (animal | non-animal, service error)
# minting -> succeeded | failed
# succeeded | failed -> awaiting_capture         (reset)
TRANSITIONS = {
    AWAITING_CAPTURE: {READY_TO_CLASSIFY},
    READY_TO_CLASSIFY: {CLASSIFYING},
    CLASSIFYING: {MINTING, FAILED},
    MINTING: {SUCCEEDED, FAILED},
    SUCCEEDED: {AWAITING_CAPTURE},
    FAILED: {AWAITING_CAPTURE},
}

TERMINAL = {SUCCEEDED, FAILED}
IN_FLIGHT = {CLASSIFYING, MINTING}
