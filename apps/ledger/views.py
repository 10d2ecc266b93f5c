from rest_framework import viewsets, status
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.pagination import PageNumberPagination
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from .models import Account
from .serializers import (
    AccountSerializer,
    AccountTransactionSerializer,
    AccountFilterSerializer,
    ExpenseSerializer,
    ExpenseSummarySerializer,
    RecordExpenseInputSerializer,
    ExpenseListQuerySerializer,
    ExpenseSummaryQuerySerializer,
)
from .services import (
    record_expense,
    list_expenses,
    expense_summary,
    get_account_transactions,
    AccountNotFoundError,
    LedgerValidationError,
    LedgerStorageError,
)


class LedgerPagination(PageNumberPagination):
    page_size = 50
    page_size_query_param = 'page_size'
    max_page_size = 200


# =============================================================================
# Accounts
# =============================================================================

class AccountViewSet(viewsets.ModelViewSet):
    """
    Funding accounts and their ledgers.

    list: Accounts with current balances (filterable by company, godown)
    create: Open an account (balance starts at zero)
    retrieve: Get one account
    transactions: Ledger entries of the account, newest first
    """

    queryset = Account.objects.all()
    serializer_class = AccountSerializer
    permission_classes = [IsAuthenticated]
    http_method_names = ['get', 'post', 'patch', 'head', 'options']

    def get_queryset(self):
        queryset = super().get_queryset()

        if self.action != 'list':
            return queryset

        filter_serializer = AccountFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        if 'company' in params:
            queryset = queryset.filter(company_id=params['company'])
        if 'godown' in params:
            queryset = queryset.filter(godown_id=params['godown'])

        return queryset

    @extend_schema(
        responses={200: AccountTransactionSerializer(many=True)},
        tags=['accounts'],
    )
    @action(detail=True, methods=['get'])
    def transactions(self, request, pk=None):
        """GET /api/accounts/{id}/transactions/"""
        account = self.get_object()
        entries = get_account_transactions(account_id=account.id)

        paginator = LedgerPagination()
        page = paginator.paginate_queryset(entries, request)
        serializer = AccountTransactionSerializer(page, many=True)
        return paginator.get_paginated_response(serializer.data)


# =============================================================================
# Expenses
# =============================================================================

@extend_schema(
    request=RecordExpenseInputSerializer,
    responses={201: ExpenseSerializer},
    description="Record an expense; debits the funding account when one is given.",
    tags=['expenses'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def add_expense(request):
    """POST /api/expenses/add/"""
    serializer = RecordExpenseInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data

    try:
        expense = record_expense(
            company_id=data['company_id'],
            godown_id=data['godown_id'],
            date=data['date'],
            category=data['category'],
            amount=data['amount'],
            description=data['description'],
            paid_to=data['paid_to'],
            payment_mode=data['payment_mode'],
            account_id=data.get('account_id'),
            entered_by=request.user,
        )
    except AccountNotFoundError as e:
        raise NotFound(str(e))
    except LedgerValidationError as e:
        raise ValidationError(str(e))
    except LedgerStorageError:
        return Response(
            {'error': 'Internal server error'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    return Response(ExpenseSerializer(expense).data, status=status.HTTP_201_CREATED)


@extend_schema(
    parameters=[ExpenseListQuerySerializer],
    responses={200: ExpenseSerializer(many=True)},
    tags=['expenses'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def expense_list(request):
    """GET /api/expenses/list/?company_id=&godown_id=&date="""
    serializer = ExpenseListQuerySerializer(data=request.query_params)
    serializer.is_valid(raise_exception=True)
    params = serializer.validated_data

    expenses = list_expenses(
        company_id=params['company_id'],
        godown_id=params['godown_id'],
        date=params.get('date'),
    )

    paginator = LedgerPagination()
    page = paginator.paginate_queryset(expenses, request)
    return paginator.get_paginated_response(ExpenseSerializer(page, many=True).data)


@extend_schema(
    parameters=[ExpenseSummaryQuerySerializer],
    responses={200: ExpenseSummarySerializer},
    tags=['expenses'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def expense_summary_view(request):
    """GET /api/expenses/summary/?company_id=&godown_id=&start_date=&end_date="""
    serializer = ExpenseSummaryQuerySerializer(data=request.query_params)
    serializer.is_valid(raise_exception=True)
    params = serializer.validated_data

    summary = expense_summary(
        company_id=params['company_id'],
        godown_id=params['godown_id'],
        start_date=params['start_date'],
        end_date=params['end_date'],
    )
    return Response(ExpenseSummarySerializer(summary).data)
