"""
GraphQL documents for every backend operation the client issues.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class OperationSpec:
    """A named GraphQL document."""
    name: str
    document: str


LOGIN = OperationSpec(
    name="LoginMutation",
    document="""
mutation LoginMutation($appId: String = "", $initData: String = "") {
  tgLogin(appId: $appId, initData: $initData)
}
""",
)

# Looked up with the x-hasura-tg-id header, no session token
CHECK_USER_EXISTS = OperationSpec(
    name="CheckUserIsExistQueryByTgId",
    document="""
query CheckUserIsExistQueryByTgId {
  telegramUser {
    walletUserId
    tgId
  }
}
""",
)

USER_WALLET_ADDRESS = OperationSpec(
    name="UserWalletAddressQuery",
    document="""
query UserWalletAddressQuery($id: uuid = "") {
  walletUserByPk(id: $id) {
    sub_wallets {
      address
    }
  }
}
""",
)

BIND_GOOGLE = OperationSpec(
    name="BindGoogleMutation",
    document="""
mutation BindGoogleMutation($address: String = "", $idToken: String = "") {
  bindGoogle(address: $address, idToken: $idToken)
}
""",
)

CREATE_ORDER = OperationSpec(
    name="CreateOrderQuery",
    document="""
mutation CreateOrderQuery($appId: String = "", $payload: String = "") {
  createOrder(appId: $appId, payload: $payload)
}
""",
)

SIMULATE_ORDER = OperationSpec(
    name="simulateOrderQuery",
    document="""
query simulateOrderQuery($payload: String = "") {
  simulateOrder(payload: $payload)
}
""",
)

CONFIRM_ORDER = OperationSpec(
    name="confirmOrderQuery",
    document="""
mutation confirmOrderQuery($orderId: String = "") {
  confirmOrder(orderId: $orderId)
}
""",
)

FETCH_ORDER_LIST = OperationSpec(
    name="fetchOrderListQuery",
    document="""
query fetchOrderListQuery(
  $walletUserId: uuid = ""
  $limit: Int = 10
  $offset: Int = 0
  $status: [Int!] = []
) {
  order(
    where: { walletUserId: { _eq: $walletUserId }, status: { _in: $status } }
    limit: $limit
    offset: $offset
    orderBy: { createdAt: DESC }
  ) {
    applicationId
    createdAt
    id
    payload
    status
    transactionSeqNo
    type
    updatedAt
    walletUserId
    transactions {
      hash
      gasFee
      createdAt
      status
      type
    }
  }
  orderAggregate(where: { walletUserId: { _eq: $walletUserId }, status: { _in: $status } }) {
    aggregate {
      count
    }
  }
}
""",
)

CREATE_TRANSFER = OperationSpec(
    name="transferQuery",
    document="""
mutation transferQuery(
  $amount: Float = 0
  $expirationAt: Float = 0
  $symbol: String
  $type: Int = 0
) {
  createTransfer(amount: $amount, expirationAt: $expirationAt, symbol: $symbol, type: $type)
}
""",
)

CREATE_MULTIPLE_TRANSFER = OperationSpec(
    name="multipleTransferQuery",
    document="""
mutation multipleTransferQuery(
  $amount: Float = 0
  $count: Int = 1
  $expirationAt: Float = 0
  $symbol: String
  $type: Int = 1
) {
  createTransfer(
    amount: $amount
    count: $count
    expirationAt: $expirationAt
    symbol: $symbol
    type: $type
  )
}
""",
)

FETCH_TRANSFER = OperationSpec(
    name="fetchTransferQuery",
    document="""
query fetchTransferQuery($id: uuid = "") {
  transferCreated(where: { id: { _eq: $id } }) {
    id
    walletUserId
    isRefund
    totalAmount
    totalCount
    expirationAt
    createdAt
    transfer_claimeds {
      walletUserId
      createdAt
    }
    transferClaimedsAggregate {
      aggregate {
        count
      }
    }
  }
}
""",
)

CLAIM_TRANSFER = OperationSpec(
    name="claimTransferQuery",
    document="""
mutation claimTransferQuery($transferId: String = "") {
  claimTransfer(transferId: $transferId)
}
""",
)
