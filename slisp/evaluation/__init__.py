from slisp.evaluation.evaluator import Evaluator
