"""Registry of node forms for the Scribl evaluator.

Maps syntax-node kinds to handler functions. The evaluator dispatches every
node through this table; kinds missing from it are reported as unhandled and
evaluate to Void.
"""

from scribl import NodeHandler
from scribl.evaluation.node_forms.assignment_form import assignment_form
from scribl.evaluation.node_forms.block_form import block_form
from scribl.evaluation.node_forms.identifier_form import identifier_form
from scribl.evaluation.node_forms.literal_forms import boolean_form, number_form, string_form
from scribl.evaluation.node_forms.member_form import member_form
from scribl.evaluation.node_forms.operator_forms import binary_form, unary_form
from scribl.evaluation.node_forms.statement_form import comment_form, statement_form

NODE_FORMS: dict[str, NodeHandler] = {
    "block": block_form,
    "statement": statement_form,
    "unary_expression": unary_form,
    "binary_expression": binary_form,
    "assignment_expression": assignment_form,
    "member_expression": member_form,
    "number": number_form,
    "string": string_form,
    "boolean": boolean_form,
    "identifier": identifier_form,
    "comment": comment_form,
}
