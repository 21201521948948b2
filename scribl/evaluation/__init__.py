from scribl.evaluation.evaluator import evaluate, evaluate0
